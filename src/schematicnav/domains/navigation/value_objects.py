"""Navigation Domain Value Objects.

Immutable types that carry no identity. Equality is structural.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Union

if TYPE_CHECKING:
    from .errors import IntentExecutionError


class IntentKind(str, Enum):
    """The closed set of intents the dispatcher understands.

    Values match the names the translator emits, so a translated
    ``{"intent": "ClickButton"}`` maps straight onto ``CLICK_BUTTON``.
    """
    NAVIGATE_TO_URL = "NavigateToUrl"
    NAVIGATE_TO_PAGE = "NavigateToPage"

    CLICK_BUTTON = "ClickButton"
    FILL_INPUT = "FillInput"
    SELECT_DROPDOWN_OPTION = "SelectDropdownOption"
    HOVER_ELEMENT = "HoverElement"
    FOCUS_ELEMENT = "FocusElement"
    BLUR_ELEMENT = "BlurElement"

    ASSERT_ELEMENT_ATTACHED = "AssertElementAttached"
    ASSERT_ELEMENT_DETACHED = "AssertElementDetached"
    ASSERT_ELEMENT_VISIBLE = "AssertElementVisible"
    ASSERT_ELEMENT_HIDDEN = "AssertElementHidden"

    WAIT_FOR_NETWORK = "WaitForNetwork"
    WAIT_FOR_SELECTOR = "WaitForSelector"

    # Safeguard
    OTHER_OR_UNKNOWN = "OtherOrUnknown"

    @classmethod
    def parse(cls, value: Union[str, "IntentKind", Any]) -> "IntentKind":
        """Map a raw kind string onto a member, falling back to OTHER_OR_UNKNOWN.

        Matching is exact first, then case-insensitive on both the value
        ("clickbutton") and the member name ("click_button").
        """
        if isinstance(value, IntentKind):
            return value
        if not value or not isinstance(value, str):
            return cls.OTHER_OR_UNKNOWN
        try:
            return cls(value)
        except ValueError:
            pass
        folded = value.strip().lower()
        for member in cls:
            if folded in (member.value.lower(), member.name.lower()):
                return member
        return cls.OTHER_OR_UNKNOWN

    @property
    def requires_target_element(self) -> bool:
        return self in _ELEMENT_TARGETING_KINDS

    @property
    def requires_inputs(self) -> bool:
        return self in _INPUT_KINDS


_ELEMENT_TARGETING_KINDS = frozenset({
    IntentKind.CLICK_BUTTON,
    IntentKind.FILL_INPUT,
    IntentKind.SELECT_DROPDOWN_OPTION,
    IntentKind.HOVER_ELEMENT,
    IntentKind.FOCUS_ELEMENT,
    IntentKind.ASSERT_ELEMENT_ATTACHED,
    IntentKind.ASSERT_ELEMENT_DETACHED,
    IntentKind.ASSERT_ELEMENT_VISIBLE,
    IntentKind.ASSERT_ELEMENT_HIDDEN,
})

_INPUT_KINDS = frozenset({
    IntentKind.NAVIGATE_TO_URL,
    IntentKind.FILL_INPUT,
    IntentKind.SELECT_DROPDOWN_OPTION,
    IntentKind.WAIT_FOR_SELECTOR,
})


@dataclass(frozen=True)
class Present:
    """A symbolic name that was supplied."""
    name: str

    def __str__(self) -> str:
        return self.name


class _Absent:
    """Marker for a symbolic name that was not supplied."""

    _instance: ClassVar[Optional["_Absent"]] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __str__(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

TargetName = Union[Present, _Absent]


def target_name(value: Optional[str]) -> TargetName:
    """Wrap an optional raw name; ``None`` and blank strings become ABSENT."""
    if isinstance(value, (Present, _Absent)):
        return value
    if value is None or not str(value).strip():
        return ABSENT
    return Present(str(value))


@dataclass(frozen=True)
class Intent:
    """A single structured user intent.

    Attributes:
        kind: What to do
        target_element: Symbolic element name, for element-targeting kinds
        target_page: Symbolic page name, for NAVIGATE_TO_PAGE
        inputs: Ordered payload strings (URL, fill value, option, raw selector)

    Examples:
        >>> Intent.create(IntentKind.CLICK_BUTTON, target_element="LoginButton")
        >>> Intent.create(IntentKind.FILL_INPUT, target_element="EmailInput",
        ...               inputs=["me@example.com"])
    """
    kind: IntentKind
    target_element: TargetName = ABSENT
    target_page: TargetName = ABSENT
    inputs: Tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        kind: Union[IntentKind, str],
        target_element: Optional[str] = None,
        target_page: Optional[str] = None,
        inputs: Optional[Iterable[Any]] = None,
    ) -> "Intent":
        """Build an intent from plain optional values."""
        return cls(
            kind=IntentKind.parse(kind),
            target_element=target_name(target_element),
            target_page=target_name(target_page),
            inputs=_coerce_inputs(inputs),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Intent":
        """Build an intent from a translator-shaped dictionary.

        Accepts both camelCase (``targetElement``) and snake_case
        (``target_element``) keys, and ``intent`` or ``kind`` for the kind.
        """
        kind = data.get("intent", data.get("kind"))
        return cls.create(
            kind=kind,
            target_element=_first_present(data, "targetElement", "target_element", "TargetElement"),
            target_page=_first_present(data, "targetPage", "target_page", "TargetPage"),
            inputs=_first_present(data, "inputs", "Inputs"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.kind.value,
            "targetElement": self.target_element.name if isinstance(self.target_element, Present) else None,
            "targetPage": self.target_page.name if isinstance(self.target_page, Present) else None,
            "inputs": list(self.inputs),
        }


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _coerce_inputs(inputs: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if inputs is None:
        return ()
    if isinstance(inputs, str):
        return (inputs,)
    return tuple("" if item is None else str(item) for item in inputs)


class TargetType(Enum):
    """What a resolved target points at."""
    URL = "url"
    SELECTOR = "selector"


@dataclass(frozen=True)
class ResolvedTarget:
    """A concrete URL or selector produced by resolution. Never persisted."""
    target_type: TargetType
    value: str

    @classmethod
    def url(cls, value: str) -> "ResolvedTarget":
        return cls(TargetType.URL, value)

    @classmethod
    def selector(cls, value: str) -> "ResolvedTarget":
        return cls(TargetType.SELECTOR, value)

    def __str__(self) -> str:
        return self.value


class ExecutionStatus(Enum):
    """Outcome classification for one dispatched intent."""
    SUCCEEDED = "succeeded"
    UNRECOGNIZED = "unrecognized"
    FAILED = "failed"


@dataclass(frozen=True)
class ExecutionResult:
    """The outcome of executing one intent.

    Attributes:
        intent_kind: Kind of the executed intent
        status: SUCCEEDED, UNRECOGNIZED (OtherOrUnknown no-op) or FAILED
        error: The typed failure, only when status is FAILED
        resolved_target: URL or selector the driver was called with, if any
        duration_ms: Wall time spent in validation, resolution and driver call
    """
    intent_kind: IntentKind
    status: ExecutionStatus
    error: Optional["IntentExecutionError"] = None
    resolved_target: Optional[ResolvedTarget] = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status is not ExecutionStatus.FAILED

    @property
    def recognized(self) -> bool:
        return self.status is not ExecutionStatus.UNRECOGNIZED

    def raise_for_failure(self) -> None:
        """Re-raise the failure, if any.

        Driver failures re-raise the driver's own exception.
        """
        if self.error is None:
            return
        original = getattr(self.error, "original", None)
        if original is not None:
            raise original
        raise self.error
