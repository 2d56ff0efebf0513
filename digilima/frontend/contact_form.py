"""
Contact form controller
Field and form validation, submission to the contact endpoint, and the
success/error feedback shown inside the form.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from digilima import messages
from digilima.config import settings
from digilima.frontend.elements import Button, FormField, LiveRegion
from digilima.frontend.i18n import translate
from digilima.frontend.state import AppState
from digilima.frontend.telemetry import NullTelemetry, Telemetry
from digilima.frontend.transport import ContactClient
from digilima.utils.validators import is_valid_email

logger = logging.getLogger(__name__)

FORM_NAME = "contact_form"
HONEYPOT_FIELD = "website"
CONSENT_FIELD = "consent"

# (JSON key, form field name)
SUBMISSION_FIELDS = (
    ("name", "name"),
    ("email", "email"),
    ("phone", "phone"),
    ("company", "company"),
    ("budget", "budget"),
    ("projectType", "project-type"),
    ("message", "message"),
)


@dataclass
class FormMessage:
    kind: str
    text: str


@dataclass
class SubmitEvent:
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


SubmitHandler = Callable[[SubmitEvent], Awaitable[Any]]


@dataclass(eq=False)
class ContactFormView:
    """The ``.contact-form`` region: its fields, submit button and message area"""
    fields: List[FormField]
    submit_button: Button = field(default_factory=lambda: Button(text="Send Message"))
    messages: List[FormMessage] = field(default_factory=list)
    submit_listeners: List[SubmitHandler] = field(default_factory=list, repr=False)

    def get_field(self, name: str) -> Optional[FormField]:
        return next((f for f in self.fields if f.name == name), None)

    def value(self, name: str) -> Optional[str]:
        """FormData.get() semantics: None when the field is absent or unchecked"""
        form_field = self.get_field(name)
        return form_field.form_value() if form_field else None

    @property
    def required_fields(self) -> List[FormField]:
        return [f for f in self.fields if f.required]

    @property
    def email_field(self) -> Optional[FormField]:
        return next((f for f in self.fields if f.type == "email"), None)

    def show_message(self, kind: str, text: str) -> None:
        """Replace whatever message is showing with a new one"""
        self.messages[:] = [FormMessage(kind=kind, text=text)]

    def reset(self) -> None:
        for form_field in self.fields:
            form_field.reset()

    def serialize(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {key: self.value(name) for key, name in SUBMISSION_FIELDS}
        payload["consent"] = self.value(CONSENT_FIELD) == "on"
        payload["website"] = self.value(HONEYPOT_FIELD)
        return payload

    def add_submit_listener(self, handler: SubmitHandler) -> None:
        self.submit_listeners.append(handler)

    async def submit(self, event: Optional[SubmitEvent] = None) -> SubmitEvent:
        """Fire the form's submit event and await every listener in order"""
        event = event or SubmitEvent()
        for handler in list(self.submit_listeners):
            await handler(event)
        return event


@dataclass(frozen=True)
class FieldValidation:
    valid: bool
    message: str = ""


class SubmissionOutcome(str, Enum):
    INVALID = "invalid"
    SPAM = "spam"
    SUCCESS = "success"
    ERROR = "error"
    NETWORK_ERROR = "network_error"



class ContactFormController:
    """Binds validation and submission behaviour to a ContactFormView"""

    def __init__(
        self,
        form: ContactFormView,
        state: AppState,
        client: ContactClient,
        telemetry: Optional[Telemetry] = None,
        live_region: Optional[LiveRegion] = None,
    ):
        self.form = form
        self.state = state
        self.client = client
        self.telemetry = telemetry or NullTelemetry()
        self.live_region = live_region
        self._idle_label: Optional[str] = None

    def bind(self) -> None:
        self.form.add_submit_listener(self.handle_submit)
        for form_field in self.form.required_fields:
            form_field.add_event_listener("blur", self.validate_field)
            form_field.add_event_listener("input", self.clear_field_error)

        email_field = self.form.email_field
        # a required email field is format-checked by validate_field already
        if email_field is not None and not email_field.required:
            email_field.add_event_listener("blur", self.validate_email)

    # Validation

    def validate_field(self, form_field: FormField) -> FieldValidation:
        value = form_field.value.strip()
        result = FieldValidation(valid=True)

        if form_field.type == "checkbox":
            if form_field.required and not form_field.checked:
                result = FieldValidation(False, translate("field_required", self.state.lang))
        elif form_field.required and not value:
            result = FieldValidation(False, translate("field_required", self.state.lang))
        elif form_field.type == "email" and value and not is_valid_email(value):
            result = FieldValidation(False, translate("invalid_email", self.state.lang))

        self._show_field_error(form_field, result)
        return result

    def validate_email(self, form_field: FormField) -> FieldValidation:
        value = form_field.value.strip()
        if value and not is_valid_email(value):
            result = FieldValidation(False, translate("invalid_email", self.state.lang))
        else:
            result = FieldValidation(True)
        self._show_field_error(form_field, result)
        return result

    def clear_field_error(self, form_field: FormField) -> None:
        form_field.remove_class("is-invalid", "is-valid")

    def validate_form(self) -> bool:
        # every field is visited so each one gets its feedback
        results = [self.validate_field(f) for f in self.form.required_fields]
        return all(result.valid for result in results)

    @staticmethod
    def _show_field_error(form_field: FormField, result: FieldValidation) -> None:
        if result.valid:
            form_field.remove_class("is-invalid")
            form_field.add_class("is-valid")
            form_field.error_text = ""
        else:
            form_field.remove_class("is-valid")
            form_field.add_class("is-invalid")
            if result.message:
                form_field.error_text = result.message

    # Submission

    def set_loading(self, loading: bool) -> None:
        button = self.form.submit_button
        if loading:
            self._idle_label = button.text
            button.disabled = True
            button.busy = True
            button.text = translate("sending", self.state.lang)
        else:
            button.disabled = False
            button.busy = False
            if self._idle_label is not None:
                button.text = self._idle_label
                self._idle_label = None

    async def handle_submit(self, event: Optional[SubmitEvent] = None) -> SubmissionOutcome:
        """Validate, post once, and render the outcome inside the form."""
        if event is not None:
            event.prevent_default()
        self.telemetry.track("form_submit", {"form_name": "contact-form"})

        if not self.validate_form():
            return SubmissionOutcome.INVALID

        if self.form.value(HONEYPOT_FIELD):
            self.form.show_message("error", messages.SUBMISSION_FAILED)
            return SubmissionOutcome.SPAM

        self.set_loading(True)
        payload = self.form.serialize()

        try:
            response = await self.client.submit(payload)
        except Exception as e:
            logger.error(f"Form submission error: {e}")
            self.set_loading(False)
            self.form.show_message(
                "error",
                translate("network_error", self.state.lang, support_email=settings.SUPPORT_EMAIL),
            )
            self.telemetry.track("form_submission_network_error", {"form_name": FORM_NAME, "error": str(e)})
            return SubmissionOutcome.NETWORK_ERROR

        self.set_loading(False)

        if response.ok and response.body.get("success"):
            self.form.show_message("success", translate("submit_success", self.state.lang))
            self.form.reset()
            self.telemetry.track(
                "form_submission_success",
                {
                    "form_name": FORM_NAME,
                    "project_type": payload["projectType"],
                    "budget": payload["budget"],
                },
            )
            if self.live_region is not None:
                self.live_region.announce(translate("announce_success", self.state.lang))
            return SubmissionOutcome.SUCCESS

        error = response.body.get("error")
        self.form.show_message("error", error or translate("submit_error", self.state.lang))
        self.telemetry.track("form_submission_error", {"form_name": FORM_NAME, "error": error or "unknown_error"})
        return SubmissionOutcome.ERROR
