from banksim.logger import Logger


def test_flush_writes_text_with_trailing_newline(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(path)
    logger.write("first ")
    logger.write("second")
    logger.flush()
    assert path.read_text(encoding="utf-8") == "first second\n"


def test_lshift_appends(tmp_path):
    logger = Logger(tmp_path / "x.log")
    logger << "a" << "b"
    assert logger.text == "ab"


def test_flush_finalizes_and_ignores_later_writes(tmp_path):
    path = tmp_path / "log.txt"
    logger = Logger(path)
    logger.write("once")
    logger.flush()
    assert logger.finalized
    assert logger.path == ""
    logger.write("more")
    assert logger.text == ""
    logger.flush()
    assert path.read_text(encoding="utf-8") == "once\n"


def test_flush_without_path_keeps_text():
    logger = Logger("")
    logger.write("kept")
    logger.flush()
    assert not logger.finalized
    assert logger.text == "kept"


def test_none_path_never_writes():
    logger = Logger(None)
    logger.write("kept")
    logger.flush()
    assert logger.path == ""
    assert logger.text == "kept"


def test_take_moves_contents(tmp_path):
    path = tmp_path / "moved.log"
    source = Logger(path)
    source.write("payload")
    moved = source.take()
    assert moved.text == "payload"
    assert moved.path == str(path)
    assert source.finalized
    assert source.text == ""
    moved.flush()
    assert path.read_text(encoding="utf-8") == "payload\n"


def test_take_of_finalized_logger_is_finalized(tmp_path):
    source = Logger(tmp_path / "a.log")
    source.write("x")
    source.flush()
    moved = source.take()
    assert moved.finalized
    assert moved.text == ""


def test_unopenable_file_is_skipped(tmp_path):
    path = tmp_path / "missing" / "log.txt"
    logger = Logger(path)
    logger.write("lost")
    logger.flush()
    assert logger.finalized
    assert not path.exists()