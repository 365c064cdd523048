import logging
import logging.handlers
import sys

import pytest

from sitemapcsv.logging_config import LOG_FILENAME, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
	root = logging.getLogger()
	handlers, level = list(root.handlers), root.level
	yield root
	for h in list(root.handlers):
		if h not in handlers:
			root.removeHandler(h)
			h.close()
	root.setLevel(level)


def _added(root, before):
	return [h for h in root.handlers if h not in before]


def test_stream_only_without_log_dir(restore_root_logger, tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	root = restore_root_logger
	before = list(root.handlers)
	assert configure_logging(level="info", log_dir="") is None
	added = _added(root, before)
	assert len(added) == 1
	assert isinstance(added[0], logging.StreamHandler)
	assert not isinstance(added[0], logging.FileHandler)
	assert added[0].stream is sys.stderr
	assert root.level == logging.INFO
	assert list(tmp_path.iterdir()) == []


def test_log_dir_adds_rotating_file(restore_root_logger, tmp_path):
	root = restore_root_logger
	before = list(root.handlers)
	log_dir = tmp_path / "logs"
	path = configure_logging(level="DEBUG", log_dir=str(log_dir))
	assert path == str(log_dir / LOG_FILENAME)
	files = [h for h in _added(root, before) if isinstance(h, logging.handlers.RotatingFileHandler)]
	assert len(files) == 1
	logging.getLogger("sitemapcsv.test").debug("hello log")
	files[0].flush()
	assert "hello log" in (log_dir / LOG_FILENAME).read_text(encoding="utf-8")


def test_reconfigure_keeps_foreign_handlers(restore_root_logger, tmp_path):
	root = restore_root_logger
	foreign = logging.NullHandler()
	root.addHandler(foreign)
	before = [h for h in root.handlers if h is not foreign]
	configure_logging(log_dir=str(tmp_path / "logs"))
	configure_logging(log_dir="")
	assert foreign in root.handlers
	assert len(_added(root, before + [foreign])) == 1
	root.removeHandler(foreign)


def test_unknown_level_falls_back_to_warning(restore_root_logger):
	configure_logging(level="chatty")
	assert restore_root_logger.level == logging.WARNING
