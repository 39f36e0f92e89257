from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PasswordStrengthSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('min_length', models.PositiveIntegerField(default=10, help_text='Minimum number of characters required in the password.', validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(50)], verbose_name='Minimum Length')),
                ('min_numeric', models.PositiveIntegerField(default=2, help_text='Minimum number of digits (0-9) required in the password.', validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(20)], verbose_name='Minimum Digits')),
                ('min_special', models.PositiveIntegerField(default=2, help_text='Minimum number of special characters (!@#$%^&*(),.?":{}|<>) required in the password.', validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(20)], verbose_name='Minimum Special Characters')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'Password Strength Settings',
                'verbose_name_plural': 'Password Strength Settings',
            },
        ),
    ]
