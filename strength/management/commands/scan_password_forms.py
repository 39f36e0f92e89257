"""
Management command to run the live password validator headlessly on an HTML page.

Runs the full bootstrap -> locate -> bind pipeline on a virtual clock, reports
what was detected and, optionally, types a password and tries to submit.

Usage:
    python manage.py scan_password_forms page.html
    python manage.py scan_password_forms page.html --password 'Password12!!' --confirm 'Password12!!' --submit
"""
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from enforcer.classifier import default_classifier
from enforcer.config import ClientConfig, document_config_provider
from enforcer.dom import Document
from enforcer.scheduler import ManualScheduler, RetryPolicy
from enforcer.watch import FormWatcher
from strength.conf import get_setting
from strength.models import PasswordStrengthSettings


def describe(element):
    if element is None:
        return '-'
    parts = [f"<{element.name}"]
    for attr in ('id', 'name', 'type'):
        if element.get(attr):
            parts.append(f'{attr}="{element[attr]}"')
    classes = element.get('class')
    if classes:
        parts.append(f'class="{" ".join(classes) if isinstance(classes, list) else classes}"')
    return ' '.join(parts) + '>'


class Command(BaseCommand):
    help = 'Detect password forms in an HTML file and simulate the live validator'

    def add_arguments(self, parser):
        parser.add_argument('html_file', help='Path to the HTML page to scan')
        parser.add_argument('--password', default=None, help='Type this into the primary field')
        parser.add_argument('--confirm', default=None, help='Type this into the confirmation field')
        parser.add_argument(
            '--submit',
            action='store_true',
            help='Submit the form after typing and report whether it was blocked'
        )

    def handle(self, *args, **options):
        path = Path(options['html_file'])
        try:
            markup = path.read_text(encoding='utf-8')
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")

        document = Document(markup)
        page_provider = document_config_provider(document, get_setting('CONFIG_ELEMENT_ID'))

        def provider():
            # Pages saved without the injected config fall back to stored settings
            config = page_provider()
            if config is None:
                config = ClientConfig(thresholds=PasswordStrengthSettings.get_thresholds())
            return config

        scheduler = ManualScheduler()
        watcher = FormWatcher(
            document,
            scheduler,
            retry_policy=RetryPolicy(
                max_attempts=get_setting('RETRY_MAX_ATTEMPTS'),
                base_delay=get_setting('RETRY_BASE_DELAY'),
            ),
            settle_delay=get_setting('SETTLE_DELAY'),
            message_element_id=get_setting('MESSAGE_ELEMENT_ID'),
        )
        watcher.start(provider)
        scheduler.run_until_idle()

        forms = document.select('form')
        self.stdout.write(f"Forms found: {len(forms)}")
        for index, form in enumerate(forms, start=1):
            kind = 'login' if default_classifier.is_login_form(form) else 'password set/reset'
            self.stdout.write(f"   {index}. {describe(form)} -> {kind}")

        controller = watcher.controller
        if controller is None:
            self.stdout.write(self.style.WARNING("No password field eligible for strength validation."))
            return

        fields = controller.fields
        self.stdout.write(self.style.SUCCESS("Validator bound:"))
        self.stdout.write(f"   Primary: {describe(fields.primary)}")
        self.stdout.write(f"   Confirm: {describe(fields.confirm)}")
        self.stdout.write(f"   Submit:  {describe(fields.submit)}")

        if options['password'] is not None:
            if options['confirm'] is not None and fields.confirm is not None:
                document.set_value(fields.confirm, options['confirm'])
            document.type_into(fields.primary, options['password'])
            self.report(document, controller)

        if options['submit']:
            if controller.form is None:
                self.stdout.write(self.style.WARNING("Primary field is not inside a form; nothing to submit."))
                return
            if document.submit(controller.form):
                self.stdout.write(self.style.SUCCESS("Submit allowed."))
            else:
                self.stdout.write(self.style.ERROR("Submit blocked."))
            self.report(document, controller)

    def report(self, document, controller):
        message = controller.message_element
        result = controller.last_result
        if result is not None:
            style = self.style.SUCCESS if result.overall_valid else self.style.ERROR
            self.stdout.write(style(f"Valid: {'yes' if result.overall_valid else 'no'}"))
        if message is not None:
            self.stdout.write(f"Message: {document.text(message)}")
        submit = controller.fields.submit
        if submit is not None:
            self.stdout.write(f"Submit control: {'disabled' if document.is_disabled(submit) else 'enabled'}")
