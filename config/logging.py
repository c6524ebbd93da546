import json
import logging
import sys
from datetime import UTC, datetime

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'


class JSONFormatter(logging.Formatter):
	"""One JSON object per record, for log shippers."""

	def format(self, record: logging.LogRecord) -> str:
		entry = {
			'timestamp': datetime.fromtimestamp(record.created, UTC).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
		}
		if record.exc_info:
			entry['exception'] = self.formatException(record.exc_info)
		return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = 'INFO', json_logs: bool = False) -> None:
	"""Configure the root logger with a single stdout handler."""
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

	handler = logging.StreamHandler(sys.stdout)
	if json_logs:
		handler.setFormatter(JSONFormatter())
	else:
		handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
	root_logger.addHandler(handler)

	logging.getLogger('httpx').setLevel(logging.WARNING)
	logging.getLogger('httpcore').setLevel(logging.WARNING)
