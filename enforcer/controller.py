"""
Live validation controller for a located password field set.
"""
import enum
import logging

from .messages import MessageCatalog, format_result
from .rules import evaluate

logger = logging.getLogger(__name__)


MESSAGE_ELEMENT_ID = 'password-strength-message'
FIELD_EVENTS = ('input', 'keyup', 'paste')
SUBMIT_DISABLED_CLASS = 'submit-disabled'
MESSAGE_KINDS = ('success', 'error')


class ControllerState(enum.Enum):
    UNINITIALIZED = 'uninitialized'
    BOUND = 'bound'
    EVALUATED = 'evaluated'


class ValidationController:
    """
    Keeps the validity of one FieldSet up to date and renders it.

    Validity starts out False, so a form cannot be submitted before the
    user has typed anything. Every watched event replaces ``last_result``
    with a fresh evaluation.

    Args:
        document: The enforcer Document owning the fields
        fields: FieldSet with at least a primary field
        thresholds: Thresholds to enforce
        messages: MessageCatalog with the top-level texts
        message_element_id: Id of the optional message surface
    """

    def __init__(self, document, fields, thresholds, messages=None,
                 message_element_id=MESSAGE_ELEMENT_ID):
        if fields.primary is None:
            raise ValueError("A controller needs a primary password field")
        self.document = document
        self.fields = fields
        self.thresholds = thresholds
        self.messages = messages or MessageCatalog()
        self.message_element_id = message_element_id
        self.state = ControllerState.UNINITIALIZED
        self.last_result = None
        self.is_valid = False
        self.form = None
        self._listeners = []

    @property
    def is_bound(self):
        return self.state is not ControllerState.UNINITIALIZED

    @property
    def message_element(self):
        return self.document.get_by_id(self.message_element_id)

    def bind(self):
        if self.is_bound:
            return self

        for field in (self.fields.primary, self.fields.confirm):
            if field is None:
                continue
            for event_type in FIELD_EVENTS:
                self._listen(field, event_type, self._on_field_event)

        self.form = self.document.enclosing_form(self.fields.primary)
        if self.form is not None:
            self._listen(self.form, 'submit', self._on_submit)

        self.state = ControllerState.BOUND
        self.is_valid = False
        self.last_result = None
        self._update_submit()
        logger.debug("Bound password strength controller to <%s id=%r>",
                     self.fields.primary.name, self.fields.primary.get('id'))
        return self

    def unbind(self):
        for listener in self._listeners:
            self.document.remove_listener(listener)
        self._listeners = []
        self.form = None
        self.state = ControllerState.UNINITIALIZED

    def _listen(self, target, event_type, handler):
        self._listeners.append(self.document.add_listener(target, event_type, handler))

    def _on_field_event(self, event):
        self.validate()

    def _on_submit(self, event):
        if not self.is_valid:
            event.prevent_default()
            self.show_message(self.messages.submit_disabled, 'error')
            logger.debug("Blocked submit of a form with an invalid password")

    def validate(self):
        """Evaluate the current field values and render the outcome."""
        password = self.document.value(self.fields.primary)
        has_confirm = self.fields.confirm is not None
        confirm = self.document.value(self.fields.confirm) if has_confirm else None

        result = evaluate(password, self.thresholds, confirm)
        self.last_result = result
        self.is_valid = result.overall_valid
        self.state = ControllerState.EVALUATED

        text, kind = format_result(password, result, self.thresholds, has_confirm, self.messages)
        self.show_message(text, kind)
        self._update_submit()
        return result

    def show_message(self, text, kind):
        element = self.message_element
        if element is None:
            return
        self.document.set_text(element, text)
        self.document.remove_class(element, *MESSAGE_KINDS)
        self.document.add_class(element, kind)

    def clear_message(self):
        element = self.message_element
        if element is not None:
            self.document.set_text(element, '')
            self.document.remove_class(element, *MESSAGE_KINDS)

    def _update_submit(self):
        submit = self.fields.submit
        if submit is None:
            return
        self.document.set_disabled(submit, not self.is_valid)
        if self.is_valid:
            self.document.remove_class(submit, SUBMIT_DISABLED_CLASS)
        else:
            self.document.add_class(submit, SUBMIT_DISABLED_CLASS)
