"""
Bootstrap and DOM watch loop.

``FormWatcher`` owns the single active ValidationController for a document.
It keeps retrying initialization until the configuration and the password
fields are both available, and re-runs detection after new password inputs
are inserted into the page.
"""
import logging

from .config import ClientConfig
from .controller import MESSAGE_ELEMENT_ID, ValidationController
from .dom import contains_password_input
from .exceptions import EnforcerError
from .locator import default_locator
from .scheduler import RetryPolicy, ScheduledRetry

logger = logging.getLogger(__name__)


DEFAULT_SETTLE_DELAY = 0.1


class FormWatcher:
    """
    Args:
        document: enforcer Document (also the mutation source)
        scheduler: Scheduler providing timers
        locator: FieldLocator used on every detection pass
        retry_policy: RetryPolicy for the bootstrap loop
        settle_delay: Seconds to wait after a mutation before re-scanning
        message_element_id: Id of the message surface
    """

    def __init__(self, document, scheduler, locator=default_locator,
                 retry_policy=RetryPolicy(), settle_delay=DEFAULT_SETTLE_DELAY,
                 message_element_id=MESSAGE_ELEMENT_ID):
        self.document = document
        self.scheduler = scheduler
        self.locator = locator
        self.retry_policy = retry_policy
        self.settle_delay = settle_delay
        self.message_element_id = message_element_id
        self.controller = None
        self.config_provider = None
        self.bind_count = 0
        self._retry = None
        self._subscription = None
        self._settle_timer = None

    @property
    def active(self):
        return self.controller is not None and self.controller.is_bound

    def start(self, config_provider):
        """
        Begin bootstrap. Safe to call repeatedly: while a controller is
        active or a retry loop is running, further calls do nothing.
        """
        self.config_provider = config_provider

        if self._subscription is None:
            self._subscription = self.document.subscribe(self._on_mutations)

        if self.active:
            logger.debug("Password validator already active")
            return
        if self._retry is not None and self._retry.running:
            logger.debug("Password validator initialization already in progress")
            return

        self._retry = ScheduledRetry(
            self.scheduler, self.retry_policy, self.initialize,
            on_exhausted=self._on_exhausted,
        ).start()

    def stop(self):
        if self._retry is not None:
            self._retry.cancel()
        if self._settle_timer is not None:
            self._settle_timer.cancel()
            self._settle_timer = None
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self.teardown()

    def teardown(self):
        if self.controller is not None:
            self.controller.unbind()
            self.controller = None

    def initialize(self):
        """
        One attempt at locate -> bind.

        Returns:
            bool: True when a controller is active afterwards
        """
        if self.active:
            return True

        try:
            config = self._load_config()
        except EnforcerError as exc:
            logger.warning("Invalid password strength configuration: %s", exc)
            return False
        if config is None:
            logger.debug("Waiting for password strength configuration")
            return False

        fields = self.locator.locate(self.document)
        if not fields.found:
            logger.debug("No password field to validate yet")
            return False

        self.controller = ValidationController(
            self.document, fields, config.thresholds, config.messages,
            message_element_id=self.message_element_id,
        )
        self.controller.clear_message()
        self.controller.bind()
        self.bind_count += 1
        logger.info("Password strength validator bound")
        return True

    def _load_config(self):
        if self.config_provider is None:
            return None
        raw = self.config_provider()
        if raw is None or isinstance(raw, ClientConfig):
            return raw
        return ClientConfig.from_mapping(raw)

    def _fields_unchanged(self):
        fields = self.locator.locate(self.document)
        current = self.controller.fields
        return (
            fields.primary is current.primary
            and fields.confirm is current.confirm
            and fields.submit is current.submit
        )

    def _on_exhausted(self):
        logger.info("Password strength validator could not be initialized")

    def _on_mutations(self, records):
        if not any(contains_password_input(node) for record in records for node in record.added):
            return
        if self._settle_timer is not None:
            # A rescan is already pending; it will see this change too
            return
        self._settle_timer = self.scheduler.call_later(self.settle_delay, self._rescan)

    def _rescan(self):
        self._settle_timer = None
        if self.active and self._fields_unchanged():
            logger.debug("Password fields unchanged, keeping the active validator")
            return
        logger.debug("New password field detected, re-running detection")
        self.teardown()
        if self.initialize():
            if self._retry is not None:
                self._retry.cancel()
            return
        if self._retry is None or not self._retry.running:
            self._retry = ScheduledRetry(
                self.scheduler, self.retry_policy, self.initialize,
                on_exhausted=self._on_exhausted,
            ).start()
