from loguru import logger

from table_import.core.logging import configure_logging


def test_file_sink_receives_messages(tmp_path):
    log_file = tmp_path / "import.log"
    configure_logging(level="DEBUG", log_file=str(log_file))
    try:
        logger.info("Parseando: pages.yml")
    finally:
        configure_logging(level="INFO", log_file="")

    assert "Parseando: pages.yml" in log_file.read_text(encoding="utf-8")
