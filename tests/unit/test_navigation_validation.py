"""Unit tests for intent validation checks.

Run with: uv run pytest tests/unit/test_navigation_validation.py -v
"""

__test__ = True

import pytest

from schematicnav.domains.navigation.errors import (
    MissingInputError,
    MissingTargetError,
    UnknownElementError,
    UnknownPageError,
)
from schematicnav.domains.navigation.validation import (
    require_element_exists,
    require_first_input,
    require_inputs,
    require_page_exists,
    require_target_element,
    require_target_page,
    validate_intent,
)
from schematicnav.domains.navigation.value_objects import Intent, IntentKind


# =============================================================================
# Individual checks
# =============================================================================


class TestRequireChecks:

    def test_require_inputs(self):
        intent = Intent.create(IntentKind.FILL_INPUT, inputs=["a", "b"])
        assert require_inputs(intent, IntentKind.FILL_INPUT) == ("a", "b")

    def test_require_inputs_message(self):
        with pytest.raises(MissingInputError) as exc_info:
            require_inputs(Intent.create(IntentKind.FILL_INPUT), IntentKind.FILL_INPUT)
        assert str(exc_info.value) == "Did not supply input to command FillInput"
        assert exc_info.value.intent_kind is IntentKind.FILL_INPUT

    def test_require_first_input_rejects_blank(self):
        intent = Intent.create(IntentKind.WAIT_FOR_SELECTOR, inputs=[" "])
        with pytest.raises(MissingInputError):
            require_first_input(intent, IntentKind.WAIT_FOR_SELECTOR)

    def test_require_target_element(self):
        intent = Intent.create(IntentKind.CLICK_BUTTON, target_element="LoginButton")
        assert require_target_element(intent, IntentKind.CLICK_BUTTON) == "LoginButton"

    def test_require_target_element_message(self):
        with pytest.raises(MissingTargetError, match="Did not supply element to command HoverElement"):
            require_target_element(Intent.create(IntentKind.HOVER_ELEMENT), IntentKind.HOVER_ELEMENT)

    def test_require_target_page(self):
        with pytest.raises(MissingTargetError, match="NavigateToPage"):
            require_target_page(Intent.create(IntentKind.NAVIGATE_TO_PAGE))

    def test_require_element_exists(self, site_config):
        assert require_element_exists("HomeMenu", site_config) == "HomeMenu"
        with pytest.raises(UnknownElementError) as exc_info:
            require_element_exists("Ghost", site_config, IntentKind.CLICK_BUTTON)
        assert str(exc_info.value) == "Invalid element for ClickButton: Ghost"

    def test_require_page_exists(self, site_config):
        assert require_page_exists("Login", site_config) == "Login"
        with pytest.raises(UnknownPageError, match="Invalid page: Checkout"):
            require_page_exists("Checkout", site_config)


# =============================================================================
# validate_intent
# =============================================================================


class TestValidateIntent:

    def test_valid_intents_pass(self, site_config):
        validate_intent(Intent.create(IntentKind.NAVIGATE_TO_PAGE, target_page="Home"), site_config)
        validate_intent(Intent.create(IntentKind.FILL_INPUT, target_element="EmailInput", inputs=[""]), site_config)
        validate_intent(Intent.create(IntentKind.WAIT_FOR_NETWORK), site_config)
        validate_intent(Intent.create(IntentKind.BLUR_ELEMENT), site_config)
        validate_intent(Intent.create(IntentKind.OTHER_OR_UNKNOWN), site_config)

    def test_missing_target_reported_before_inputs(self, site_config):
        with pytest.raises(MissingTargetError):
            validate_intent(Intent.create(IntentKind.FILL_INPUT), site_config)

    def test_unknown_element_reported_before_inputs(self, site_config):
        with pytest.raises(UnknownElementError):
            validate_intent(Intent.create(IntentKind.FILL_INPUT, target_element="Ghost"), site_config)

    def test_missing_inputs(self, site_config):
        with pytest.raises(MissingInputError):
            validate_intent(
                Intent.create(IntentKind.SELECT_DROPDOWN_OPTION, target_element="CountrySelect"),
                site_config,
            )

    def test_wait_for_selector_ignores_element_map(self, site_config):
        validate_intent(Intent.create(IntentKind.WAIT_FOR_SELECTOR, inputs=["#anything"]), site_config)

    def test_unknown_page(self, site_config):
        with pytest.raises(UnknownPageError):
            validate_intent(Intent.create(IntentKind.NAVIGATE_TO_PAGE, target_page="Nope"), site_config)
