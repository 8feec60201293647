"""Live reload support for development mode."""

from elm_reactor.live.notifier import ChangeNotifier

__all__ = ["ChangeNotifier"]
