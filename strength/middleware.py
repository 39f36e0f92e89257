"""
Inject client-side password strength support into HTML responses.
"""
import logging

from django.utils.html import json_script

from enforcer.classifier import default_classifier
from enforcer.config import ClientConfig
from enforcer.dom import Document
from enforcer.locator import default_locator
from enforcer.messages import requirements_summary
from .conf import get_setting
from .models import PasswordStrengthSettings
from .page_rules import should_load_validator

logger = logging.getLogger(__name__)


MESSAGE_CONTAINER_SELECTOR = '.form-row, p, .field'
MESSAGE_CLASSES = 'password-validation-message strength-message error'


def insert_message_placeholder(document, thresholds, element_id):
    """
    Add the message element after the first eligible password field.

    Returns:
        bool: True if an element was inserted
    """
    if document.get_by_id(element_id) is not None:
        return False

    fields = default_locator.locate(document)
    if not fields.found:
        return False

    container = document.closest(fields.primary, MESSAGE_CONTAINER_SELECTOR)
    if container is None:
        container = fields.primary.parent
    if container is None:
        return False

    if default_classifier.is_login_form(document.enclosing_form(container)):
        logger.debug("Skipping validation message - detected login form")
        return False

    element = document.create_element(
        'div',
        attrs={'id': element_id, 'class': MESSAGE_CLASSES},
        text=requirements_summary(thresholds),
    )
    document.insert_after(container, element)
    return True


def insert_config_element(document, config, element_id):
    if document.get_by_id(element_id) is not None:
        return False
    document.append_html(document.body, json_script(config.as_client_dict(), element_id))
    return True


class PasswordStrengthMiddleware:
    """
    For pages classified by ``should_load_validator``: render the client
    configuration into the page and, if the page has an eligible password
    field without a message element, add the default placeholder.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        if not get_setting('ENABLED'):
            return response
        if not self.is_injectable(response) or not should_load_validator(request):
            return response

        return self.inject(response)

    def is_injectable(self, response):
        if response.status_code != 200 or response.streaming:
            return False
        return response.get('Content-Type', '').startswith('text/html')

    def inject(self, response):
        charset = response.charset or 'utf-8'
        document = Document(response.content.decode(charset))

        thresholds = PasswordStrengthSettings.get_thresholds()
        config = ClientConfig(thresholds=thresholds)

        added_config = insert_config_element(document, config, get_setting('CONFIG_ELEMENT_ID'))
        added_message = insert_message_placeholder(document, thresholds, get_setting('MESSAGE_ELEMENT_ID'))
        if not (added_config or added_message):
            return response

        logger.debug("Injected password strength support (config=%s, message=%s)",
                     added_config, added_message)
        response.content = str(document).encode(charset)
        if response.has_header('Content-Length'):
            response['Content-Length'] = str(len(response.content))
        return response
