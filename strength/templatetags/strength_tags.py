from django import template
from django.utils.html import format_html, json_script

from enforcer.config import ClientConfig
from enforcer.messages import requirements_summary
from strength.conf import get_setting
from strength.models import PasswordStrengthSettings

register = template.Library()


@register.simple_tag
def password_strength_message():
    """
    Render the message placeholder the live validator writes into.
    Usage: {% password_strength_message %}
    """
    thresholds = PasswordStrengthSettings.get_thresholds()
    return format_html(
        '<div id="{}" class="password-validation-message strength-message error">{}</div>',
        get_setting('MESSAGE_ELEMENT_ID'),
        requirements_summary(thresholds),
    )


@register.simple_tag
def password_strength_config():
    """
    Render the client configuration as a JSON script element.
    Usage: {% password_strength_config %}
    """
    config = ClientConfig(thresholds=PasswordStrengthSettings.get_thresholds())
    return json_script(config.as_client_dict(), get_setting('CONFIG_ELEMENT_ID'))


@register.filter
def add_class(field, css_class):
    """
    Add a CSS class to a form field widget.
    Usage: {{ form.field|add_class:"form-control" }}
    """
    return field.as_widget(attrs={"class": css_class})
