"""Secret validation policies for translation service credentials.

Every policy is described by a :class:`ValidatorSpec` and evaluated by
:func:`check_secret`. Validation never raises: malformed credentials come
back as a :class:`ValidationResult` with ``status=False`` and a message
suitable for showing next to the settings field.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Sequence, Union

SECRET_NOT_SET = "The secret is not set."
SECRET_NOT_SET_CONFIGURE = "The secret is not set. Click the button to configure."
CHECK_CONNECTIVITY = "Click the button to check connectivity."
INVALID_KEY_FORMAT = "The secret key format is invalid."

SecretInput = Union[str, Mapping[str, object]]


class ValidatorKind(str, Enum):
    ALWAYS_ACCEPT = "always_accept"
    NON_EMPTY = "non_empty"
    FIXED_LENGTH = "fixed_length"
    DELIMITED_PARTS = "delimited_parts"
    PATTERN_MATCH = "pattern_match"
    STRUCTURED_OR_LEGACY = "structured_or_legacy"


@dataclass(slots=True)
class ValidationResult:
    """Outcome of validating a secret; ``secret`` echoes the input."""

    secret: str
    status: bool
    info: str

    def to_dict(self) -> Dict[str, object]:
        return {"secret": self.secret, "status": self.status, "info": self.info}


@dataclass(frozen=True, slots=True)
class SecretPart:
    """One ``#``-separated field of a structured secret."""

    label: str
    default: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ValidatorSpec:
    kind: ValidatorKind
    # DELIMITED_PARTS
    title: str = ""
    secret_format: str = ""
    part_counts: tuple[int, ...] = ()
    parts: tuple[SecretPart, ...] = ()
    # FIXED_LENGTH
    lengths: tuple[int, ...] = ()
    min_length: Optional[int] = None
    first_segment_only: bool = False
    # PATTERN_MATCH
    pattern: Optional[str] = None
    lenient: bool = False
    # messages shared by several kinds
    ok_info: str = ""
    empty_info: str = ""
    invalid_info: str = ""


def always_accept() -> ValidatorSpec:
    return ValidatorSpec(kind=ValidatorKind.ALWAYS_ACCEPT)


def non_empty(ok_info: str = "", empty_info: str = "") -> ValidatorSpec:
    return ValidatorSpec(kind=ValidatorKind.NON_EMPTY, ok_info=ok_info, empty_info=empty_info)


def fixed_length(
    invalid_info: str,
    lengths: Sequence[int] = (),
    min_length: Optional[int] = None,
    first_segment_only: bool = False,
) -> ValidatorSpec:
    """``invalid_info`` may reference the observed length as ``{length}``."""
    if not lengths and min_length is None:
        raise ValueError("fixed_length needs exact lengths or a minimum length")
    return ValidatorSpec(
        kind=ValidatorKind.FIXED_LENGTH,
        lengths=tuple(lengths),
        min_length=min_length,
        first_segment_only=first_segment_only,
        invalid_info=invalid_info,
    )


def delimited_parts(
    title: str,
    secret_format: str,
    part_counts: Sequence[int],
    parts: Sequence[SecretPart],
) -> ValidatorSpec:
    return ValidatorSpec(
        kind=ValidatorKind.DELIMITED_PARTS,
        title=title,
        secret_format=secret_format,
        part_counts=tuple(part_counts),
        parts=tuple(parts),
    )


def pattern_match(pattern: str, invalid_info: str, lenient: bool = False) -> ValidatorSpec:
    """The whole secret must match ``pattern``; ``lenient`` accepts any non-empty secret."""
    return ValidatorSpec(
        kind=ValidatorKind.PATTERN_MATCH,
        pattern=pattern,
        lenient=lenient,
        ok_info=CHECK_CONNECTIVITY,
        invalid_info=invalid_info,
    )


def structured_or_legacy() -> ValidatorSpec:
    return ValidatorSpec(kind=ValidatorKind.STRUCTURED_OR_LEGACY)


def _check_always_accept(spec: ValidatorSpec, secret: str, default_secret: Optional[str]) -> ValidationResult:
    return ValidationResult(secret=secret, status=True, info="")


def _check_non_empty(spec: ValidatorSpec, secret: str, default_secret: Optional[str]) -> ValidationResult:
    status = secret != ""
    return ValidationResult(secret=secret, status=status, info=spec.ok_info if status else spec.empty_info)


def _check_fixed_length(spec: ValidatorSpec, secret: str, default_secret: Optional[str]) -> ValidationResult:
    key = secret.split("#")[0] if spec.first_segment_only else secret
    length = len(key)
    if spec.lengths:
        status = length in spec.lengths
    else:
        status = length >= spec.min_length
    return ValidationResult(
        secret=secret,
        status=status,
        info="" if status else spec.invalid_info.format(length=length),
    )


def _describe_parts(parts: Sequence[SecretPart], values: Sequence[str]) -> str:
    lines = []
    for position, part in enumerate(parts):
        value = values[position] if position < len(values) else ""
        if not value and part.default is not None:
            value = part.default
        lines.append(f"{part.label}: {value}")
    return "\n".join(lines)


def _check_delimited_parts(spec: ValidatorSpec, secret: str, default_secret: Optional[str]) -> ValidationResult:
    values = secret.split("#")
    listing = _describe_parts(spec.parts, values)
    if secret == default_secret:
        return ValidationResult(secret=secret, status=False, info=SECRET_NOT_SET)
    if len(values) in spec.part_counts:
        return ValidationResult(secret=secret, status=True, info=listing)
    counts = " or ".join(str(count) for count in spec.part_counts)
    info = (
        f"The secret format of {spec.title} is {spec.secret_format}. "
        f"The secret must have {counts} parts joined by '#', but got {len(values)}.\n{listing}"
    )
    return ValidationResult(secret=secret, status=False, info=info)


def _check_pattern_match(spec: ValidatorSpec, secret: str, default_secret: Optional[str]) -> ValidationResult:
    matched = re.fullmatch(spec.pattern, secret) is not None
    if not secret:
        info = SECRET_NOT_SET
    elif matched:
        info = spec.ok_info
    else:
        info = spec.invalid_info
    status = matched or (spec.lenient and bool(secret))
    return ValidationResult(secret=secret, status=status, info=info)


def _repo_ids(value: object) -> Optional[str]:
    """Join a repo id list; ``None`` when ``value`` is present but not a list."""
    if not value:
        return ""
    if not isinstance(value, (list, tuple)):
        return None
    return ", ".join(str(repo) for repo in value)


def _check_structured_record(secret: str, config: Mapping[str, object]) -> Optional[ValidationResult]:
    """Report each field of a JSON record, or ``None`` if the record is malformed."""
    term_repos = _repo_ids(config.get("termRepoIDList"))
    sent_repos = _repo_ids(config.get("sentRepoIDList"))
    if term_repos is None or sent_repos is None:
        return None
    has_required = bool(config.get("secretId")) and bool(config.get("secretKey"))
    if not has_required:
        return ValidationResult(secret=secret, status=False, info="SecretId and SecretKey are required.")
    info = "\n".join(
        [
            f"SecretId: {config.get('secretId') or 'Not set'}",
            f"SecretKey: {'Set' if config.get('secretKey') else 'Not set'}",
            f"Region: {config.get('region') or 'ap-shanghai'}",
            f"ProjectId: {config.get('projectId') or '0'}",
            f"Term Repo IDs: {term_repos or 'None'}",
            f"Sent Repo IDs: {sent_repos or 'None'}",
        ]
    )
    return ValidationResult(secret=secret, status=True, info=info)


def _check_legacy_record(secret: str) -> ValidationResult:
    values = secret.split("#")

    def field(position: int) -> str:
        return values[position] if position < len(values) else ""

    if not (field(0) and field(1)):
        return ValidationResult(
            secret=secret,
            status=False,
            info=(
                "SecretId and SecretKey are required. Use format: "
                "SecretId#SecretKey#Region(optional)#ProjectId(optional) "
                "or click button for advanced configuration."
            ),
        )
    info = "\n".join(
        [
            f"SecretId: {field(0)}",
            "SecretKey: Set",
            f"Region: {field(2) or 'ap-shanghai'}",
            f"ProjectId: {field(3) or '0'}",
        ]
    )
    return ValidationResult(secret=secret, status=True, info=info)


def _check_structured_or_legacy(
    spec: ValidatorSpec, secret: str, default_secret: Optional[str]
) -> ValidationResult:
    if not secret or secret == default_secret:
        return ValidationResult(secret=secret, status=False, info=SECRET_NOT_SET_CONFIGURE)
    try:
        config = json.loads(secret)
    except (ValueError, RecursionError):
        config = None
    if isinstance(config, dict) and config.get("secretId"):
        result = _check_structured_record(secret, config)
        if result is not None:
            return result
    return _check_legacy_record(secret)


_CHECKS: Dict[ValidatorKind, Callable[[ValidatorSpec, str, Optional[str]], ValidationResult]] = {
    ValidatorKind.ALWAYS_ACCEPT: _check_always_accept,
    ValidatorKind.NON_EMPTY: _check_non_empty,
    ValidatorKind.FIXED_LENGTH: _check_fixed_length,
    ValidatorKind.DELIMITED_PARTS: _check_delimited_parts,
    ValidatorKind.PATTERN_MATCH: _check_pattern_match,
    ValidatorKind.STRUCTURED_OR_LEGACY: _check_structured_or_legacy,
}


def check_secret(
    spec: ValidatorSpec,
    secret: Optional[SecretInput],
    default_secret: Optional[str] = None,
) -> ValidationResult:
    """Validate ``secret`` against ``spec``.

    Structured records may be passed as a mapping; they are checked and
    echoed in their JSON form.
    """
    if secret is None:
        secret = ""
    elif isinstance(secret, Mapping):
        secret = json.dumps(dict(secret), separators=(",", ":"))
    return _CHECKS[spec.kind](spec, secret, default_secret)
