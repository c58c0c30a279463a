"""Render workflow notifications to the terminal."""

from roster.client.notifications import Notification, Notifier
from roster_cli.display.console import console


class NotificationRenderer:
    """Print notifications as success/error lines and dismiss them."""

    def __init__(self, notifier: Notifier, quiet: bool = False):
        self.notifier = notifier
        self.quiet = quiet

    def render(self, notification: Notification) -> None:
        if notification.is_error:
            console.print(
                f"[bold red]✗[/bold red] {notification.title}: {notification.description}"
            )
        elif not self.quiet:
            console.print(f"[bold green]✓[/bold green] {notification.description}")

    def flush(self) -> int:
        """Render and dismiss every active notification.

        Returns:
            Number of error notifications rendered
        """
        errors = 0
        for notification in self.notifier.active():
            self.render(notification)
            if notification.is_error:
                errors += 1
            self.notifier.dismiss(notification.id)
        return errors
