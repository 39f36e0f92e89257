from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from enforcer.classifier import is_login_form
from enforcer.dom import Document


class LoginViewTest(TestCase):

    def setUp(self):
        self.url = reverse('authentication:login')
        self.user = User.objects.create_user('frank', password='Zebra7!Kite9?')

    def test_login_page_is_a_login_form(self):
        """The sign-in form must never get strength validation"""
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        document = Document(response.content.decode())
        self.assertTrue(is_login_form(document.select_one('form')))
        self.assertNotContains(response, 'password-strength-config')

    def test_successful_login(self):
        response = self.client.post(self.url, {'username': 'frank', 'password': 'Zebra7!Kite9?'})
        self.assertRedirects(response, reverse('strength:account_password'))

    def test_weak_password_can_sign_in_with_a_warning(self):
        """Existing weak passwords still sign in, but the user is asked to change them"""
        User.objects.create_user('gina', password='weak')
        response = self.client.post(self.url, {'username': 'gina', 'password': 'weak'}, follow=True)
        self.assertRedirects(response, reverse('strength:account_password'))
        self.assertContains(response, 'does not meet the current password requirements')

    def test_strong_password_gets_no_warning(self):
        response = self.client.post(
            self.url, {'username': 'frank', 'password': 'Zebra7!Kite9?'}, follow=True
        )
        self.assertContains(response, 'Welcome back, frank!')
        self.assertNotContains(response, 'does not meet the current password requirements')

    def test_invalid_credentials(self):
        response = self.client.post(self.url, {'username': 'frank', 'password': 'wrong'})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Invalid username or password.')

    def test_next_url_is_followed_when_safe(self):
        response = self.client.post(
            f"{self.url}?next=/password-strength/settings/",
            {'username': 'frank', 'password': 'Zebra7!Kite9?'},
        )
        self.assertEqual(response['Location'], '/password-strength/settings/')

    def test_external_next_url_is_ignored(self):
        response = self.client.post(
            f"{self.url}?next=https://evil.example.com/",
            {'username': 'frank', 'password': 'Zebra7!Kite9?'},
        )
        self.assertRedirects(response, reverse('strength:account_password'))

    def test_remember_me_sets_long_session(self):
        self.client.post(self.url, {'username': 'frank', 'password': 'Zebra7!Kite9?', 'remember_me': 'on'})
        self.assertEqual(self.client.session.get_expiry_age(), 1209600)

    def test_logout(self):
        self.client.force_login(self.user)
        response = self.client.get(reverse('authentication:logout'))
        self.assertRedirects(response, self.url)
