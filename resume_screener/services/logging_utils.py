from typing import Callable, Optional


def print_with_prefix(prefix: str, message: Optional[str], enabled: bool = True) -> None:
    if not enabled:
        return
    text = "" if message is None else str(message)
    for line in text.splitlines() or [""]:
        print(f"{prefix} {line}" if line else prefix)


def make_logger(component: str, enabled: bool = True) -> Callable[[str], None]:
    """Ritorna una funzione di log con prefisso `[component]`, attiva solo se `enabled`."""
    prefix = f"[{component}]"

    def _log(message: str) -> None:
        print_with_prefix(prefix, message, enabled=enabled)

    return _log


def log_section(
    log_fn: Callable[[str], None],
    title: str,
    width: int = 60,
    char: str = "-",
) -> None:
    rule = char * width
    log_fn(rule)
    log_fn(title)
    log_fn(rule)
