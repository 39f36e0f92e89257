from django.test import SimpleTestCase

from enforcer.classifier import FormClassifier
from enforcer.dom import Document
from enforcer.locator import FieldLocator, SelectorRule, locate

from .pages import SINGLE_FIELD_PAGE, WOO_LOGIN_FORM, WOO_RESET_FORM, WP_RESET_FORM


class LocateTest(SimpleTestCase):

    def test_wordpress_reset_form(self):
        document = Document(WP_RESET_FORM)
        fields = locate(document)
        self.assertIs(fields.primary, document.get_by_id('pass1'))
        self.assertIs(fields.confirm, document.get_by_id('pass2'))
        self.assertIs(fields.submit, document.get_by_id('wp-submit'))

    def test_woocommerce_reset_form(self):
        document = Document(WOO_RESET_FORM)
        fields = locate(document)
        self.assertIs(fields.primary, document.get_by_id('password_1'))
        self.assertIs(fields.confirm, document.get_by_id('password_2'))
        self.assertEqual(fields.submit.name, 'button')

    def test_reset_container_without_ids(self):
        document = Document(
            '<form class="woocommerce-ResetPassword">'
            '<input type="password" class="a"><input type="password" class="b">'
            '</form>'
        )
        fields = locate(document)
        self.assertEqual(fields.primary['class'], ['a'])
        self.assertEqual(fields.confirm['class'], ['b'])
        self.assertIsNone(fields.submit)

    def test_specific_selector_wins_inside_login_form(self):
        document = Document('<form class="login"><input type="password" id="pass1"></form>')
        self.assertIs(locate(document).primary, document.get_by_id('pass1'))

    def test_specific_selectors_are_tried_in_order(self):
        document = Document(
            '<input type="password" id="pass1"><input type="password" id="password_1">'
        )
        self.assertIs(locate(document).primary, document.get_by_id('password_1'))

    def test_generic_field_in_login_form_is_rejected(self):
        document = Document(WOO_LOGIN_FORM)
        fields = locate(document)
        self.assertFalse(fields.found)
        self.assertIsNone(fields.confirm)
        self.assertIsNone(fields.submit)

    def test_generic_field_outside_login_form_is_accepted(self):
        document = Document(SINGLE_FIELD_PAGE)
        fields = locate(document)
        self.assertIs(fields.primary, document.get_by_id('password'))
        self.assertIsNone(fields.confirm)
        self.assertEqual(fields.submit.get('type'), 'submit')

    def test_generic_field_without_form_is_accepted(self):
        document = Document('<div><input type="password" name="password"></div>')
        self.assertTrue(locate(document).found)

    def test_skips_login_form_and_takes_later_generic_match(self):
        document = Document(
            '<form class="login"><input name="username">'
            '<input type="password" name="password"><button type="submit">Log in</button></form>'
            '<form class="profile"><input type="password" name="password" class="new">'
            '<input type="password" name="password_confirm">'
            '<button type="submit" class="save">Save</button></form>'
        )
        fields = locate(document)
        self.assertEqual(fields.primary['class'], ['new'])
        self.assertEqual(fields.confirm['name'], 'password_confirm')
        # Submit is looked up inside the primary field's own form first
        self.assertEqual(fields.submit['class'], ['save'])

    def test_submit_falls_back_to_document(self):
        document = Document(
            '<form><input type="password" id="pass1"></form>'
            '<div class="wp-pwd"><button>Generate</button></div>'
        )
        self.assertEqual(locate(document).submit.get_text(), 'Generate')

    def test_submit_of_another_form_is_ignored(self):
        document = Document(
            WOO_LOGIN_FORM
            + '<form id="resetpassform">'
            '<input type="password" id="pass1"><input type="password" id="pass2">'
            '</form>'
        )
        fields = locate(document)
        self.assertEqual(fields.primary['id'], 'pass1')
        self.assertIsNone(fields.submit)

    def test_field_outside_forms_ignores_form_submit(self):
        document = Document(
            '<input type="password" id="pass1">'
            '<form><input type="text" name="q"><button type="submit">Search</button></form>'
            '<button class="button-primary">Save</button>'
        )
        self.assertEqual(locate(document).submit.get_text(), 'Save')

    def test_no_password_field(self):
        self.assertFalse(locate(Document('<form><input name="q"></form>')).found)


class CustomRulesTest(SimpleTestCase):

    def test_custom_rule_tables(self):
        locator = FieldLocator(
            primary_rules=(SelectorRule('input.new-secret'),),
            confirm_rules=(SelectorRule('input.secret', index=1),),
        )
        document = Document(
            '<input type="password" class="secret new-secret">'
            '<input type="password" class="secret">'
        )
        fields = locator.locate(document)
        self.assertIs(fields.primary, document.select('input')[0])
        self.assertIs(fields.confirm, document.select('input')[1])

    def test_classifier_override_is_used_for_generic_fields(self):
        locator = FieldLocator(classifier=FormClassifier(override=lambda form: True))
        document = Document(SINGLE_FIELD_PAGE)
        self.assertFalse(locator.locate(document).found)
