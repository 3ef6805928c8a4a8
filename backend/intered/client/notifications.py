"""Toast notifications: the only channel the data layer uses to talk to the user."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

ToastVariant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Toast:
    title: str
    description: str = ""
    variant: ToastVariant = "default"

    @property
    def is_destructive(self) -> bool:
        return self.variant == "destructive"


class ToastCenter:
    """Collects toasts in order and forwards them to any subscribed renderer."""

    def __init__(self, limit: int = 50):
        self._toasts: list[Toast] = []
        self._listeners: list[Callable[[Toast], None]] = []
        self._limit = limit

    @property
    def toasts(self) -> list[Toast]:
        return list(self._toasts)

    @property
    def destructive(self) -> list[Toast]:
        return [t for t in self._toasts if t.is_destructive]

    def toast(self, title: str, description: str = "", variant: ToastVariant = "default") -> Toast:
        toast = Toast(title=title, description=description, variant=variant)
        self._toasts.append(toast)
        if len(self._toasts) > self._limit:
            del self._toasts[0]

        log = logger.warning if toast.is_destructive else logger.info
        log("toast [%s] %s", title, description)
        for listener in list(self._listeners):
            listener(toast)
        return toast

    def success(self, title: str, description: str = "") -> Toast:
        return self.toast(title, description)

    def error(self, title: str, description: str = "") -> Toast:
        return self.toast(title, description, variant="destructive")

    def subscribe(self, listener: Callable[[Toast], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear(self) -> None:
        self._toasts.clear()
