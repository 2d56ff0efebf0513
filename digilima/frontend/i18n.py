"""Localized strings shown by the site's interactive code (English and Greek)."""

from typing import Dict

from digilima import messages

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "el")

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "field_required": "This field is required",
        "invalid_email": "Please enter a valid email address",
        "sending": "Sending...",
        "submit_success": messages.SUBMISSION_ACCEPTED,
        "submit_error": "Something went wrong. Please try again.",
        "network_error": (
            "There was an error sending your message. "
            "Please try again or contact us directly at {support_email}."
        ),
        "announce_success": "Form submitted successfully. We'll get back to you soon!",
    },
    "el": {
        "field_required": "Αυτό το πεδίο είναι υποχρεωτικό",
        "invalid_email": "Παρακαλώ εισάγετε έγκυρη διεύθυνση email",
        "sending": "Αποστολή...",
        "submit_success": (
            "Ευχαριστούμε! Το μήνυμά σας στάλθηκε με επιτυχία. "
            "Θα επικοινωνήσουμε μαζί σας εντός 24 ωρών."
        ),
        "submit_error": "Κάτι πήγε στραβά. Παρακαλώ δοκιμάστε ξανά.",
        "network_error": (
            "Υπήρξε σφάλμα κατά την αποστολή της φόρμας. "
            "Παρακαλώ δοκιμάστε ξανά ή επικοινωνήστε μαζί μας άμεσα στο {support_email}."
        ),
        "announce_success": "Η φόρμα υποβλήθηκε με επιτυχία. Θα επικοινωνήσουμε σύντομα μαζί σας!",
    },
}


def translate(key: str, lang: str, **params) -> str:
    """Look up ``key`` for ``lang``, falling back to English."""
    table = CATALOG.get(lang, CATALOG[DEFAULT_LANGUAGE])
    text = table.get(key, CATALOG[DEFAULT_LANGUAGE][key])
    return text.format(**params) if params else text
