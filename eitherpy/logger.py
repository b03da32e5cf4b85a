from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, Optional

from .either import Either


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _check_level(level: str) -> str:
    level = level.upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    return level


class ConsoleLogger:
    def __init__(self, name: str = "eitherpy", level: str = "INFO", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def log(self, level: str, msg: str, **fields: Any) -> None:
        level = _check_level(level)
        if _LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v!r}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)


def traced(logger: ConsoleLogger, msg: str, level: str = "DEBUG") -> Callable[[Either[Any, Any]], Either[Any, Any]]:
    """Build a pass-through step that logs which side an Either holds."""
    level = _check_level(level)

    def run(e: Either[Any, Any]) -> Either[Any, Any]:
        return e.peek(
            lambda v: logger.log(level, msg, side="left", value=v),
            lambda v: logger.log(level, msg, side="right", value=v),
        )
    return run
