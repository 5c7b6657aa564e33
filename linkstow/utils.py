import os
from pathlib import Path


def clean_abs_path(path: str | Path) -> Path:
    """Absolute, lexically cleaned form of ``path``; symlinks are not resolved."""
    return Path(os.path.abspath(os.fspath(path)))


def link_destination(link: Path) -> Path:
    raw = os.readlink(link)
    if not os.path.isabs(raw):
        raw = os.path.join(os.path.dirname(link), raw)
    return clean_abs_path(raw)


def relative_link_value(source: Path, link: Path) -> str:
    return os.path.relpath(source, link.parent)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
