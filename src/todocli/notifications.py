# notifications.py
import logging

from plyer import notification

logger = logging.getLogger(__name__)


def notify_task_completed(title: str) -> None:
    try:
        notification.notify(
            title="✅ Task completed",
            message=f"'{title}' is done!",
            timeout=10
        )
    except (NotImplementedError, ImportError, OSError):
        # No notification backend (headless box, missing dbus, ...).
        logger.warning("desktop notification failed for task %r", title, exc_info=True)
