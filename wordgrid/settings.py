import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    GRID_SIZE: int = 4
    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0
    SEARCH_WORKERS: int = 1

    NOTIFY_ENABLED: bool = False
    NTFY_TOPIC: str = "wordgrid"
    NTFY_URL: str = "https://ntfy.sh"
    NOTIFY_WORDS_PER_GROUP: int = 10

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "wordlist.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed while the service is running, with their types.
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "SEARCH_WORKERS": int,
    "NOTIFY_ENABLED": bool,
    "NTFY_TOPIC": str,
    "NOTIFY_WORDS_PER_GROUP": int,
    "DEBUG": bool,
}

# Lower bounds for editable ints; anything not listed must not be negative.
MIN_VALUES: dict[str, int] = {
    "MIN_WORD_LENGTH": 3,
}


def _coerce(current, value):
    if value is None:
        raise ValueError("null is not allowed")
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        if isinstance(value, bool):
            raise ValueError(f"expected an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply runtime edits. Valid fields are updated even if others fail.

    Returns a mapping of field name to error message for rejected values.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if not hasattr(cfg, name):
            errors[name] = "unknown setting"
            continue
        if name not in EDITABLE_FIELDS:
            errors[name] = "setting is not editable"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value: {e}"
            continue
        if EDITABLE_FIELDS[name] is int and coerced < MIN_VALUES.get(name, 0):
            errors[name] = f"must be at least {MIN_VALUES.get(name, 0)}"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
