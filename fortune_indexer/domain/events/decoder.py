"""Decode raw stream logs into ticket contract events.

Each known event gets a matcher. ``decode_log`` runs the matchers in catalog
order and returns the first :class:`Matched` result, or :class:`Unmatched` when
none of them accepts the log. A matcher accepts a log only when the event
signature hash, the topic count and the ABI layout of topics and data all line
up, so a mismatch never raises.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes

from .catalog import TICKET_EVENTS, EventDefinition, EventInput
from .models import DecodeResult, Matched, MintedLevel, RawLog, Unmatched


Matcher = Callable[[RawLog], DecodeResult]


def _normalize(item: EventInput, value: Any) -> Any:
    if item.type == "address":
        return str(value).lower()
    if item.name == "levels":
        return [
            MintedLevel(roll_number=int(roll), win_percentage=int(percentage), win_amount=int(amount))
            for roll, percentage, amount in value
        ]
    return value


def _decode_args(event: EventDefinition, log: RawLog) -> dict[str, Any]:
    args: dict[str, Any] = {}
    for item, topic in zip(event.indexed_inputs, log.topics[1:]):
        (value,) = abi_decode([item.abi_type], HexBytes(topic))
        args[item.name] = _normalize(item, value)

    data_inputs = event.data_inputs
    values = abi_decode([item.abi_type for item in data_inputs], HexBytes(log.data)) if data_inputs else ()
    for item, value in zip(data_inputs, values):
        args[item.name] = _normalize(item, value)
    return args


def make_matcher(event: EventDefinition) -> Matcher:
    topic = event.topic.lower()
    expected_topics = 1 + len(event.indexed_inputs)

    def matcher(log: RawLog) -> DecodeResult:
        if not log.topics or log.topics[0].lower() != topic:
            return Unmatched(f"topic0 is not {event.name}")
        if len(log.topics) != expected_topics:
            return Unmatched(f"{event.name} expects {expected_topics} topics, got {len(log.topics)}")
        try:
            args = _decode_args(event, log)
        except (DecodingError, ValueError, TypeError) as exc:
            return Unmatched(f"{event.name} layout mismatch: {exc}")
        return Matched(event.name, args)

    matcher.__name__ = f"match_{event.name}"
    return matcher


class EventDecoder:
    """Ordered matcher chain; earlier matchers take priority."""

    def __init__(self, events: Iterable[EventDefinition] = TICKET_EVENTS) -> None:
        self._events = tuple(events)
        self._matchers: Sequence[Matcher] = tuple(make_matcher(event) for event in self._events)

    @property
    def event_names(self) -> list[str]:
        return [event.name for event in self._events]

    def decode(self, log: RawLog) -> DecodeResult:
        if not log.topics:
            return Unmatched("log has no event signature")
        for matcher in self._matchers:
            result = matcher(log)
            if isinstance(result, Matched):
                return result
        return Unmatched()


default_decoder = EventDecoder()


def decode_log(log: RawLog) -> DecodeResult:
    return default_decoder.decode(log)
