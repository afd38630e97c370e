import pytest

from synthcli.payload import AVATAR_ID, BACKGROUND_ID, VOICE_ID, build_payload


@pytest.mark.parametrize("test_flag", [True, False])
def test_payload_reflects_inputs(test_flag):
    payload = build_payload("intro", "Hello world.", test_flag)

    assert payload["test"] is test_flag
    assert payload["title"] == "intro"
    assert payload["visibility"] == "private"
    assert len(payload["input"]) == 1
    assert payload["input"][0]["scriptText"] == "Hello world."


def test_payload_fixed_presentation_settings():
    segment = build_payload("a", "b", True)["input"][0]

    assert segment["avatar"] == AVATAR_ID
    assert segment["background"] == BACKGROUND_ID
    assert segment["avatarSettings"] == {
        "horizontalAlign": "center",
        "scale": 1,
        "style": "rectangular",
        "seamless": False,
        "voice": VOICE_ID,
    }
    assert segment["backgroundSettings"]["videoSettings"] == {
        "shortBackgroundContentMatchMode": "freeze",
        "longBackgroundContentMatchMode": "trim",
    }


def test_payload_is_deterministic_and_not_shared():
    first = build_payload("t", "s", False)
    first["input"][0]["avatarSettings"]["scale"] = 2

    assert build_payload("t", "s", False)["input"][0]["avatarSettings"]["scale"] == 1
    assert build_payload("t", "s", False) == build_payload("t", "s", False)


@pytest.mark.parametrize("title,text", [("", "body"), ("title", "")])
def test_payload_rejects_empty_fields(title, text):
    with pytest.raises(ValueError):
        build_payload(title, text, True)
