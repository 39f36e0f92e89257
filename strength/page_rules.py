"""
Page classification: should a request get client-side password support?

Only pages that plausibly show a password set/reset form get the
configuration element and message placeholder injected.
"""
from django.urls import NoReverseMatch, reverse


RESET_URL_PATTERNS = (
    '/reset',
    '/lost-password',
    '/set-password',
    '/change-password',
    '/reset-password',
    'action=rp',
    'show-reset-form=true',
    'wc_reset_password',
)
RESET_POST_KEYS = ('reset_key', 'reset_login', 'wc_reset_password')
RESET_GET_KEYS = ('show-reset-form', 'reset-link-sent')


def is_admin_request(request):
    try:
        admin_root = reverse('admin:index')
    except NoReverseMatch:
        return False
    return request.path.startswith(admin_root)


def page_might_have_password_form(request):
    """Check URL patterns and request data that commonly indicate password reset."""
    request_uri = request.get_full_path().lower()
    if any(pattern.lower() in request_uri for pattern in RESET_URL_PATTERNS):
        return True

    if any(key in request.POST for key in RESET_POST_KEYS):
        return True

    return any(key in request.GET for key in RESET_GET_KEYS)


def should_load_validator(request):
    # Reset links sent by email
    if request.GET.get('action') == 'rp':
        return True
    if 'key' in request.GET and 'login' in request.GET:
        return True

    if is_admin_request(request):
        return False

    return page_might_have_password_form(request)
