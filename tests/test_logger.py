from datetime import datetime

import pytest

from wscollector.core.errors import CollectionLogError
from wscollector.core.logger import CollectionLogger

from conftest import read_log


def test_line_format(logger, log_path):
    logger.info("Printer: No connected printers.")
    logger.warning("Proxy: Autodetect proxy setting is un-set!")
    logger.error("Outlook PST: Unable to get PST Information")

    lines = log_path.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 3

    timestamp, rest = lines[0].split('  ', 1)
    parsed = datetime.fromisoformat(timestamp)
    assert parsed.tzinfo is not None
    assert rest == "Info: Printer: No connected printers."

    assert [level for level, _ in read_log(log_path)] == ['Info', 'Warn', 'Error']


def test_appends_to_existing_log(run_context, log_path):
    run_context.working_directory.mkdir(parents=True)
    log_path.write_text("previous run\n", encoding='utf-8')

    with CollectionLogger(log_path, 1) as collection_logger:
        collection_logger.info("second run")

    lines = log_path.read_text(encoding='utf-8').splitlines()
    assert lines[0] == "previous run"
    assert lines[1].endswith("  Info: second run")


def test_line_visible_before_close(logger, log_path):
    logger.info("flushed")
    assert "Info: flushed" in log_path.read_text(encoding='utf-8')


def test_verbosity_zero_does_no_io(run_context, log_path):
    run_context.working_directory.mkdir(parents=True)

    collection_logger = CollectionLogger(log_path, 0)
    collection_logger.info("ignored")
    collection_logger.error("ignored too")
    collection_logger.close()

    assert not log_path.exists()


def test_debug_written_only_when_verbose(run_context, log_path):
    run_context.working_directory.mkdir(parents=True)

    with CollectionLogger(log_path, 1) as collection_logger:
        collection_logger.debug("hidden")
        collection_logger.info("shown")
    assert read_log(log_path) == [('Info', 'shown')]

    with CollectionLogger(log_path, 2) as collection_logger:
        collection_logger.debug("detail")
    assert read_log(log_path)[-1] == ('Debug', 'detail')


def test_unknown_level_rejected(logger):
    with pytest.raises(ValueError):
        logger.log('Fatal', "boom")


def test_unwritable_destination_raises(tmp_path):
    collection_logger = CollectionLogger(tmp_path / "missing" / "run.log", 1)
    with pytest.raises(CollectionLogError):
        collection_logger.info("nowhere to go")
    collection_logger.close()


def test_collection_log_error_is_os_error():
    assert issubclass(CollectionLogError, OSError)


def test_stream_breaking_mid_run_raises(run_context, log_path, disk_full_after):
    run_context.working_directory.mkdir(parents=True)
    streams = disk_full_after(1)
    collection_logger = CollectionLogger(log_path, 1)

    collection_logger.info("first line")
    with pytest.raises(CollectionLogError):
        collection_logger.info("disk is full now")

    collection_logger.close()
    assert len(streams[0].lines) == 1
    assert streams[0].lines[0].endswith("  Info: first line\n")


def test_close_after_broken_stream_does_not_raise(logger, disk_full_after):
    disk_full_after(0)

    with pytest.raises(CollectionLogError):
        logger.info("never written")

    logger.close()
    logger.close()
