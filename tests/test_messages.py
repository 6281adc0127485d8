from telegram_relay.telegram.guidance import Guidance
from telegram_relay.telegram.messages import CATALOGS, render


def test_catalogs_have_the_same_keys():
    assert set(CATALOGS["en"]) == set(CATALOGS["ru"])


def test_every_guidance_has_text():
    for guidance in Guidance:
        for catalog in CATALOGS.values():
            assert catalog[guidance.value].strip()


def test_unknown_locale_falls_back_to_english():
    assert render("de", "delivered") == CATALOGS["en"]["delivered"]


def test_render_formats_params():
    assert "boom" in render("en", "network.error", error="boom")
    assert "(Код: 400)" == render("ru", "provider.code", code=400).strip()
