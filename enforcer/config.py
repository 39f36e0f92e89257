"""
Client configuration record.

The host supplies ``{minLength, minNumeric, minSpecial, messages?}``, usually
as a JSON script element rendered into the page. snake_case keys are
accepted too.
"""
import json
from dataclasses import dataclass, field
from typing import Mapping

from .exceptions import ConfigurationError
from .messages import MessageCatalog
from .rules import Thresholds


CONFIG_ELEMENT_ID = 'password-strength-config'

_KEYS = (
    ('min_length', 'minLength'),
    ('min_numeric', 'minNumeric'),
    ('min_special', 'minSpecial'),
)


def _coerce_int(value):
    # Hosts that localize scripts often hand numbers over as strings
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return value


@dataclass(frozen=True)
class ClientConfig:
    thresholds: Thresholds
    messages: MessageCatalog = field(default_factory=MessageCatalog)

    @classmethod
    def from_mapping(cls, data: Mapping):
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")

        values = {}
        for snake, camel in _KEYS:
            if camel in data:
                values[snake] = _coerce_int(data[camel])
            elif snake in data:
                values[snake] = _coerce_int(data[snake])
            else:
                raise ConfigurationError(f"Configuration is missing '{camel}'")

        messages = data.get('messages') or {}
        if not isinstance(messages, Mapping):
            raise ConfigurationError("'messages' must be a mapping")

        return cls(
            thresholds=Thresholds(**values),
            messages=MessageCatalog.from_overrides(messages),
        )

    def as_client_dict(self):
        """Shape rendered into pages for the client."""
        return {
            'minLength': self.thresholds.min_length,
            'minNumeric': self.thresholds.min_numeric,
            'minSpecial': self.thresholds.min_special,
            'messages': {
                'requirements_met': self.messages.requirements_met,
                'requirements_not_met': self.messages.requirements_not_met,
                'submit_disabled': self.messages.submit_disabled,
            },
        }


def document_config_provider(document, element_id=CONFIG_ELEMENT_ID):
    """
    Build a provider that reads the JSON config element from the document.

    The provider returns None while the element is absent, so a bootstrap
    loop keeps waiting instead of falling back to defaults.
    """
    def provider():
        element = document.get_by_id(element_id)
        if element is None:
            return None
        try:
            data = json.loads(element.get_text() or 'null')
        except ValueError as exc:
            raise ConfigurationError(f"Invalid JSON in #{element_id}: {exc}") from exc
        if data is None:
            return None
        return ClientConfig.from_mapping(data)

    return provider
