from django.contrib.auth.models import User
from django.contrib.auth.tokens import default_token_generator
from django.test import TestCase
from django.urls import reverse
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

from enforcer.rules import Thresholds
from strength.models import PasswordStrengthSettings

STRONG = 'Zebra7!Kite9?'


class SettingsViewTest(TestCase):

    def setUp(self):
        self.url = reverse('strength:settings')
        self.staff = User.objects.create_user('admin', password=STRONG, is_staff=True)
        self.user = User.objects.create_user('carol', password=STRONG)

    def test_requires_staff(self):
        self.client.force_login(self.user)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('admin:login'), response['Location'])

    def test_shows_current_settings(self):
        self.client.force_login(self.staff)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'name="min_length"')
        self.assertContains(response, 'class="small-text"')

    def test_updates_thresholds(self):
        self.client.force_login(self.staff)
        response = self.client.post(self.url, {'min_length': 14, 'min_numeric': 3, 'min_special': 1}, follow=True)
        self.assertRedirects(response, self.url)
        self.assertContains(response, 'Password strength settings saved.')
        self.assertEqual(PasswordStrengthSettings.get_thresholds(), Thresholds(14, 3, 1))

    def test_invalid_values_are_not_saved(self):
        self.client.force_login(self.staff)
        response = self.client.post(self.url, {'min_length': 99, 'min_numeric': 2, 'min_special': 2})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(PasswordStrengthSettings.get_thresholds(), Thresholds(10, 2, 2))


class PasswordResetConfirmViewTest(TestCase):

    def setUp(self):
        self.user = User.objects.create_user('dave', email='dave@example.com', password='Old#Pass12!x')
        uidb64 = urlsafe_base64_encode(force_bytes(self.user.pk))
        token = default_token_generator.make_token(self.user)
        response = self.client.get(reverse('password_reset_confirm', args=[uidb64, token]))
        self.form_url = response['Location']

    def test_form_carries_client_support(self):
        response = self.client.get(self.form_url)
        self.assertContains(response, 'id="resetpassform"')
        self.assertContains(response, 'id="password-strength-message"', count=1)
        self.assertContains(response, 'id="password-strength-config"', count=1)
        self.assertContains(response, '"minLength": 10')

    def test_weak_password_is_rejected(self):
        response = self.client.post(self.form_url, {'pass1': 'Passw0rd!', 'pass2': 'Passw0rd!'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Your password must contain at least 10 characters')
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('Old#Pass12!x'))

    def test_strong_password_is_accepted(self):
        response = self.client.post(self.form_url, {'pass1': STRONG, 'pass2': STRONG})
        self.assertRedirects(response, reverse('password_reset_complete'))
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password(STRONG))


class AccountPasswordViewTest(TestCase):

    def setUp(self):
        self.url = reverse('strength:account_password')
        self.user = User.objects.create_user('erin', password='Old#Pass12!x')

    def test_requires_login(self):
        response = self.client.get(self.url)
        self.assertRedirects(response, f"{reverse('authentication:login')}?next={self.url}")

    def test_page_gets_client_support_injected(self):
        self.client.force_login(self.user)
        response = self.client.get(self.url)
        self.assertContains(response, 'id="password-strength-config"', count=1)
        self.assertContains(response, 'id="password-strength-message"', count=1)

    def test_changes_password_and_keeps_session(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {
            'password_current': 'Old#Pass12!x', 'password_1': STRONG, 'password_2': STRONG,
        }, follow=True)
        self.assertContains(response, 'Your password has been changed.')
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password(STRONG))
        self.assertTrue(response.context['user'].is_authenticated)

    def test_weak_password_is_rejected(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {
            'password_current': 'Old#Pass12!x', 'password_1': 'Passw0rd!', 'password_2': 'Passw0rd!',
        })
        self.assertEqual(response.status_code, 200)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('Old#Pass12!x'))

    def test_blank_submit_leaves_password_unchanged(self):
        self.client.force_login(self.user)
        response = self.client.post(self.url, {}, follow=True)
        self.assertContains(response, 'Your password was left unchanged.')
