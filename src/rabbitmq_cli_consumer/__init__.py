from rabbitmq_cli_consumer.cli import main
from rabbitmq_cli_consumer.exceptions import ExitError, with_message
from rabbitmq_cli_consumer.exit import handle_exit_error
from rabbitmq_cli_consumer.logging import Loggers, build_loggers

__all__ = ["ExitError", "Loggers", "build_loggers", "handle_exit_error", "main", "with_message"]
