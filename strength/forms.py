from django import forms

from enforcer.rules import SPECIAL_CHARACTERS
from .models import MIN_COUNT_BOUNDS, MIN_LENGTH_BOUNDS, PasswordStrengthSettings
from .validators import StrengthPasswordValidator


class PasswordStrengthSettingsForm(forms.ModelForm):
    """Admin settings screen for the three thresholds."""

    class Meta:
        model = PasswordStrengthSettings
        fields = ['min_length', 'min_numeric', 'min_special']
        widgets = {
            'min_length': forms.NumberInput(attrs={
                'class': 'form-control',
                'min': MIN_LENGTH_BOUNDS[0],
                'max': MIN_LENGTH_BOUNDS[1],
            }),
            'min_numeric': forms.NumberInput(attrs={
                'class': 'form-control',
                'min': MIN_COUNT_BOUNDS[0],
                'max': MIN_COUNT_BOUNDS[1],
            }),
            'min_special': forms.NumberInput(attrs={
                'class': 'form-control',
                'min': MIN_COUNT_BOUNDS[0],
                'max': MIN_COUNT_BOUNDS[1],
            }),
        }
        help_texts = {
            'min_special': f'Minimum number of special characters ({SPECIAL_CHARACTERS}) required in the password.',
        }


def password_widget(field_id, autocomplete='new-password'):
    return forms.PasswordInput(attrs={
        'id': field_id,
        'class': 'form-control',
        'autocomplete': autocomplete,
    })


class StrengthSetPasswordForm(forms.Form):
    """
    Password reset form.

    Field names and ids (pass1/pass2) match what the live validator looks
    for, so the page gets client-side feedback without extra markup.
    """

    error_messages = {
        'password_mismatch': "The two password fields didn't match.",
    }

    pass1 = forms.CharField(
        label='New password',
        strip=False,
        widget=password_widget('pass1'),
        validators=[StrengthPasswordValidator()],
    )
    pass2 = forms.CharField(
        label='Confirm new password',
        strip=False,
        widget=password_widget('pass2'),
    )

    def __init__(self, user, *args, **kwargs):
        self.user = user
        super().__init__(*args, **kwargs)
        self.fields['pass1'].help_text = StrengthPasswordValidator().get_help_text()

    def clean_pass2(self):
        password1 = self.cleaned_data.get('pass1')
        password2 = self.cleaned_data.get('pass2')
        if password1 and password2 and password1 != password2:
            raise forms.ValidationError(
                self.error_messages['password_mismatch'],
                code='password_mismatch',
            )
        return password2

    def save(self, commit=True):
        self.user.set_password(self.cleaned_data['pass1'])
        if commit:
            self.user.save()
        return self.user


class AccountPasswordForm(forms.Form):
    """
    Password section of the account details page.

    All fields are optional; the new password is only checked when the user
    actually fills it in.
    """

    password_current = forms.CharField(
        label='Current password (leave blank to leave unchanged)',
        required=False,
        strip=False,
        widget=password_widget('password_current', autocomplete='current-password'),
    )
    password_1 = forms.CharField(
        label='New password (leave blank to leave unchanged)',
        required=False,
        strip=False,
        widget=password_widget('password_1'),
        validators=[StrengthPasswordValidator()],
    )
    password_2 = forms.CharField(
        label='Confirm new password',
        required=False,
        strip=False,
        widget=password_widget('password_2'),
    )

    def __init__(self, user, *args, **kwargs):
        self.user = user
        super().__init__(*args, **kwargs)

    @property
    def changes_password(self):
        return bool(self.cleaned_data.get('password_1'))

    def clean(self):
        cleaned_data = super().clean()
        current = cleaned_data.get('password_current')
        password1 = cleaned_data.get('password_1')
        password2 = cleaned_data.get('password_2')

        if 'password_1' in self.errors or not (password1 or password2 or current):
            return cleaned_data

        if not password1:
            self.add_error('password_1', "Please enter your new password.")
        elif password1 != password2:
            self.add_error('password_2', "New passwords do not match.")

        if not current:
            self.add_error('password_current', "Please enter your current password.")
        elif not self.user.check_password(current):
            self.add_error('password_current', "Your current password is incorrect.")

        return cleaned_data

    def save(self, commit=True):
        if self.changes_password:
            self.user.set_password(self.cleaned_data['password_1'])
            if commit:
                self.user.save()
        return self.user
