"""
In-process document model.

Wraps a BeautifulSoup tree and adds the pieces the form controller needs
from a browser: element events with cancellable defaults, a subtree
mutation notification stream, and a few UI mutators (text, classes,
disabled flag). Element handles are plain ``bs4.Tag`` objects borrowed from
the tree; compare them with ``is``, never ``==``.
"""
import logging
from typing import Callable, List, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


HTML_PARSER = 'html.parser'
PASSWORD_INPUT_SELECTOR = 'input[type="password"]'


class Event:
    """A dispatched event. Listeners may cancel its default action."""

    def __init__(self, type, target):
        self.type = type
        self.target = target
        self.default_prevented = False

    def prevent_default(self):
        self.default_prevented = True

    def __repr__(self):
        return f"<Event {self.type} on <{self.target.name}>>"


class Listener:
    """Handle returned by ``Document.add_listener``; used to detach it again."""

    def __init__(self, target, event_type, handler):
        self.target = target
        self.event_type = event_type
        self.handler = handler


class MutationRecord:
    """One batch of elements added to (or removed from) the tree."""

    def __init__(self, added=None, removed=None):
        self.added = list(added or [])
        self.removed = list(removed or [])

    def __repr__(self):
        return f"<MutationRecord added={len(self.added)} removed={len(self.removed)}>"


class Subscription:
    def __init__(self, document, callback):
        self._document = document
        self.callback = callback
        self.active = True

    def cancel(self):
        if self.active:
            self.active = False
            self._document._subscriptions.remove(self)


class Document:
    """
    A parsed HTML page with event dispatch and mutation notifications.

    Example:
        document = Document('<form><input type="password" id="pass1"></form>')
        field = document.get_by_id('pass1')
        document.type_into(field, 'secret')
    """

    def __init__(self, markup='', parser=HTML_PARSER):
        self.parser = parser
        self.soup = BeautifulSoup(markup, parser)
        # id(tag) -> list of Listener, in registration order
        self._listeners = {}
        self._subscriptions = []

    def __str__(self):
        return str(self.soup)

    @property
    def body(self):
        body = self.soup.body
        return self.soup if body is None else body

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def select(self, selector, root=None) -> List[Tag]:
        return (self.soup if root is None else root).select(selector)

    def select_one(self, selector, root=None) -> Optional[Tag]:
        return (self.soup if root is None else root).select_one(selector)

    def get_by_id(self, element_id) -> Optional[Tag]:
        return self.soup.find(id=element_id)

    def closest(self, element, selector) -> Optional[Tag]:
        """Nearest ancestor (or the element itself) matching selector."""
        return element.css.closest(selector)

    def enclosing_form(self, element) -> Optional[Tag]:
        return element.find_parent('form')

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_listener(self, target, event_type, handler: Callable[[Event], None]) -> Listener:
        listener = Listener(target, event_type, handler)
        self._listeners.setdefault(id(target), []).append(listener)
        return listener

    def remove_listener(self, listener):
        listeners = self._listeners.get(id(listener.target), [])
        for index, candidate in enumerate(listeners):
            if candidate is listener:
                del listeners[index]
                break
        if not listeners:
            self._listeners.pop(id(listener.target), None)

    def listener_count(self, target=None, event_type=None) -> int:
        if target is None:
            groups = self._listeners.values()
        else:
            groups = [self._listeners.get(id(target), [])]
        return sum(
            1 for listeners in groups for listener in listeners
            if event_type is None or listener.event_type == event_type
        )

    def dispatch(self, target, event_type) -> Event:
        event = Event(event_type, target)
        # Copy so handlers may detach themselves while running
        for listener in list(self._listeners.get(id(target), [])):
            if listener.event_type == event_type:
                listener.handler(event)
        return event

    # ------------------------------------------------------------------
    # Form interaction
    # ------------------------------------------------------------------

    def value(self, field) -> str:
        return field.get('value') or ''

    def set_value(self, field, value):
        field['value'] = value

    def type_into(self, field, value, event_type='input') -> Event:
        """Replace a field's value and fire the matching event, like a user edit."""
        self.set_value(field, value)
        return self.dispatch(field, event_type)

    def submit(self, form) -> bool:
        """Fire a submit event. Returns False if a listener cancelled it."""
        event = self.dispatch(form, 'submit')
        return not event.default_prevented

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def text(self, element) -> str:
        return element.get_text()

    def set_text(self, element, text):
        element.string = text

    def classes(self, element) -> list:
        value = element.get('class') or []
        if isinstance(value, str):
            value = value.split()
        return list(value)

    def has_class(self, element, name) -> bool:
        return name in self.classes(element)

    def add_class(self, element, *names):
        classes = self.classes(element)
        for name in names:
            if name not in classes:
                classes.append(name)
        element['class'] = classes

    def remove_class(self, element, *names):
        classes = [name for name in self.classes(element) if name not in names]
        if classes:
            element['class'] = classes
        elif 'class' in element.attrs:
            del element['class']

    def set_disabled(self, element, disabled):
        if disabled:
            element['disabled'] = 'disabled'
        elif 'disabled' in element.attrs:
            del element['disabled']

    def is_disabled(self, element) -> bool:
        return 'disabled' in element.attrs

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[[List[MutationRecord]], None]) -> Subscription:
        """Receive a list of MutationRecord after every tree change."""
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def create_element(self, name, attrs=None, text=None) -> Tag:
        element = self.soup.new_tag(name, attrs=dict(attrs or {}))
        if text is not None:
            element.string = text
        return element

    def _parse_fragment(self, markup):
        fragment = BeautifulSoup(markup, self.parser)
        return [node.extract() for node in list(fragment.contents)]

    def append_html(self, parent, markup) -> List[Tag]:
        """Parse markup and append it to parent. Returns the added elements."""
        nodes = self._parse_fragment(markup)
        for node in nodes:
            parent.append(node)
        added = [node for node in nodes if isinstance(node, Tag)]
        self._notify(MutationRecord(added=added))
        return added

    def insert_after(self, reference, element):
        reference.insert_after(element)
        self._notify(MutationRecord(added=[element]))
        return element

    def replace_children(self, parent, markup) -> List[Tag]:
        """Swap out everything inside parent, as an AJAX region refresh would."""
        removed = [node.extract() for node in list(parent.contents)]
        nodes = self._parse_fragment(markup)
        for node in nodes:
            parent.append(node)
        added = [node for node in nodes if isinstance(node, Tag)]
        self._notify(MutationRecord(
            added=added,
            removed=[node for node in removed if isinstance(node, Tag)],
        ))
        return added

    def remove(self, element):
        element.extract()
        self._notify(MutationRecord(removed=[element]))

    def _notify(self, record):
        logger.debug("Document mutation: %r", record)
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback([record])


def contains_password_input(element) -> bool:
    """True if element is, or contains, a password-type input."""
    if not isinstance(element, Tag):
        return False
    if element.name == 'input' and (element.get('type') or '').lower() == 'password':
        return True
    return element.select_one(PASSWORD_INPUT_SELECTOR) is not None
