"""Client-side exceptions."""


class ApiRequestError(Exception):
    """A non-2xx response, or a request that never reached the server (status 0)."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{status_code}] {message}")


class AuthProviderMissingError(RuntimeError):
    """Raised by use_auth() when the app context was built without an AuthContext."""

    def __init__(self) -> None:
        super().__init__("use_auth must be used within an AuthProvider")


class DialogStateError(RuntimeError):
    """Raised when a dialog is edited or submitted in a state that forbids it."""

    def __init__(self, dialog: str, state: str, action: str):
        self.dialog = dialog
        self.state = state
        self.action = action
        super().__init__(f"{dialog}: cannot {action} while {state}")
