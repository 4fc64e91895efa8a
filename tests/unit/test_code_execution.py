from datetime import datetime, timedelta, timezone

import pytest

from api.services.code_execution import default_snippet_title, shared_code_expiry, simulate_execution


@pytest.mark.unit
class TestSimulateExecution:
    @pytest.mark.parametrize("language,marker", [("javascript", "JavaScript output"), ("Python", "Hello, World!"), ("java", "Compiled successfully!")])
    def test_known_languages(self, language, marker):
        assert marker in simulate_execution("anything", language)

    def test_unknown_language(self):
        out = simulate_execution("fn main() {}", "rust")
        assert out.startswith("Execution for rust is simulated")


@pytest.mark.unit
class TestSnippetHelpers:
    def test_default_title(self):
        assert default_snippet_title("python", datetime(2025, 3, 7, tzinfo=timezone.utc)) == "python Snippet 3/7/2025"

    def test_expiry_is_seven_days(self):
        now = datetime(2025, 3, 7, tzinfo=timezone.utc)
        assert shared_code_expiry(now) - now == timedelta(days=7)
