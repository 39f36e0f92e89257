"""
Field location for password set/reset forms.

Each lookup walks an ordered tuple of selector rules and stops at the first
rule that yields an acceptable element. The rule tables are plain data so
the priority order can be read and tested on its own.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .classifier import FormClassifier, default_classifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorRule:
    """
    One candidate lookup.

    Attributes:
        selector: CSS selector evaluated against the whole document
        index: Which match to take (1 means the second match)
        generic: Generic rules only accept a match outside login forms
    """
    selector: str
    index: int = 0
    generic: bool = False


PRIMARY_RULES = (
    SelectorRule('#password_1'),
    SelectorRule('#pass1'),
    SelectorRule('input[name="password_1"]'),
    SelectorRule('input[name="pass1"]'),
    SelectorRule('.woocommerce-ResetPassword input[type="password"]'),
    SelectorRule('.password-input input[type="password"]'),
    SelectorRule('#password', generic=True),
    SelectorRule('input[name="password"]', generic=True),
)

CONFIRM_RULES = (
    SelectorRule('#password_2'),
    SelectorRule('#pass2'),
    SelectorRule('#password-confirm'),
    SelectorRule('input[name="password_2"]'),
    SelectorRule('input[name="pass2"]'),
    SelectorRule('input[name="password_confirm"]'),
    SelectorRule('.woocommerce-ResetPassword input[type="password"]', index=1),
    SelectorRule('.password-input input[type="password"]', index=1),
)

SUBMIT_RULES = (
    SelectorRule('input[type="submit"]'),
    SelectorRule('button[type="submit"]'),
    SelectorRule('.woocommerce-Button'),
    SelectorRule('.wp-pwd button'),
    SelectorRule('.button-primary'),
    SelectorRule('.btn-primary'),
)


@dataclass(frozen=True)
class FieldSet:
    """Elements found by one detection pass. Handles are borrowed from the document."""
    primary: Optional[object] = None
    confirm: Optional[object] = None
    submit: Optional[object] = None

    @property
    def found(self):
        return self.primary is not None


class FieldLocator:
    def __init__(self, classifier: FormClassifier = default_classifier,
                 primary_rules=PRIMARY_RULES, confirm_rules=CONFIRM_RULES,
                 submit_rules=SUBMIT_RULES):
        self.classifier = classifier
        self.primary_rules = primary_rules
        self.confirm_rules = confirm_rules
        self.submit_rules = submit_rules

    def locate(self, document) -> FieldSet:
        primary = self.find_primary(document)
        if primary is None:
            logger.debug("No password field eligible for strength validation")
            return FieldSet()

        confirm = self.find_confirm(document)
        if confirm is primary:
            confirm = None

        form = document.enclosing_form(primary)
        submit = self.find_submit(document, form=form)

        return FieldSet(primary=primary, confirm=confirm, submit=submit)

    def find_primary(self, document):
        for rule in self.primary_rules:
            matches = document.select(rule.selector)
            if not rule.generic:
                if len(matches) > rule.index:
                    return matches[rule.index]
                continue
            for field in matches[rule.index:]:
                if not self.classifier.is_login_form(document.enclosing_form(field)):
                    return field
                logger.debug("Skipping %s: enclosed in a login form", rule.selector)
        return None

    def find_confirm(self, document):
        return self._first_match(document, self.confirm_rules)

    def find_submit(self, document, form=None):
        """
        Find the submit control for a field in `form`.

        The form itself is searched first, then the rest of the document.
        Controls that belong to some other form are never returned.
        """
        if form is not None:
            submit = self._first_match(document, self.submit_rules, root=form)
            if submit is not None:
                return submit

        def outside_other_forms(control):
            owner = document.enclosing_form(control)
            return owner is None or owner is form

        return self._first_match(document, self.submit_rules, accept=outside_other_forms)

    def _first_match(self, document, rules, root=None, accept=None):
        for rule in rules:
            matches = document.select(rule.selector, root=root)
            if accept is not None:
                matches = [match for match in matches if accept(match)]
            if len(matches) > rule.index:
                return matches[rule.index]
        return None


default_locator = FieldLocator()


def locate(document) -> FieldSet:
    return default_locator.locate(document)
