import logging
import traceback
from typing import Any, Dict, List, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger once and return it."""
    logger = logging.getLogger("snippetbox")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


class ErrorHandler:
    """Centralized reporting for recoverable snippet-store errors."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("snippetbox")
        self.errors: List[Dict[str, Any]] = []

    def handle_error(
        self,
        error: Exception,
        context: Dict[str, Any],
        *,
        level: int = logging.ERROR,
    ) -> Dict[str, Any]:
        """Log the error with its context and keep it for later summaries."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
            "traceback": traceback.format_exc() if self.logger.isEnabledFor(logging.DEBUG) else None
        }

        self.logger.log(
            level,
            "%s: %s | Context: %s",
            error_info["type"],
            error_info["message"],
            context,
        )

        self.errors.append(error_info)

        return error_info

    def collect_load_error(self, error: Exception, key: str) -> Dict[str, Any]:
        """Record a failure to read or decode the stored collection."""
        context = {
            "key": key,
            "operation": "load",
        }
        return self.handle_error(error, context, level=logging.WARNING)

    def collect_save_error(self, error: Exception, key: str, operation: str) -> Dict[str, Any]:
        """Record a failed write triggered by ``operation``."""
        context = {
            "key": key,
            "operation": operation,
        }
        return self.handle_error(error, context)

    def get_error_summary(self) -> Dict[str, Any]:
        """Generate summary of all collected errors."""
        if not self.errors:
            return {"total_errors": 0, "error_types": {}, "operations": []}

        error_types: Dict[str, int] = {}
        operations = []

        for error in self.errors:
            error_type = error["type"]
            error_types[error_type] = error_types.get(error_type, 0) + 1

            context = error.get("context", {})
            operations.append({
                "operation": context.get("operation", "unknown"),
                "error": error["message"],
            })

        return {
            "total_errors": len(self.errors),
            "error_types": error_types,
            "operations": operations
        }

    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        summary = self.get_error_summary()

        if summary["total_errors"] == 0:
            return ""

        lines = [
            f"Error Summary: {summary['total_errors']} errors occurred",
            ""
        ]

        if summary["error_types"]:
            lines.append("Error Types:")
            for error_type, count in summary["error_types"].items():
                lines.append(f"  • {error_type}: {count}")
            lines.append("")

        if summary["operations"]:
            lines.append("Failed Operations:")
            for failure in summary["operations"][:5]:
                lines.append(f"  • {failure['operation']}: {failure['error']}")

            if len(summary["operations"]) > 5:
                lines.append(f"  ... and {len(summary['operations']) - 5} more")

        return "\n".join(lines)
