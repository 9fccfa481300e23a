import pytest

from emojimap.emitter import render_mapping
from emojimap.errors import AmbiguousCodepointError, UnmatchedVendorEntryError
from emojimap.reconcile import build_stripped_index, reconcile


UNICODE_DATA = {
    "thumbs_up": "1f44d-fe0f",
    "thumbs_up_light_skin_tone": "1f44d-1f3fb",
    "keycap_hash": "23-fe0f-20e3",
    "family_man_woman_girl": "1f468-200d-1f469-200d-1f467",
    "grinning_face": "1f600",
}

GITHUB_DATA = {
    "thumbsup": "1f44d",
    "+1": "1f44d",
    "hash": "23-20e3",
    "family_man_woman_girl": "1f468-1f469-1f467",
}


def test_build_stripped_index():
    assert build_stripped_index(UNICODE_DATA) == {
        "1f44d": "1f44d-fe0f",
        "1f44d-1f3fb": "1f44d-1f3fb",
        "23-20e3": "23-fe0f-20e3",
        "1f468-1f469-1f467": "1f468-200d-1f469-200d-1f467",
        "1f600": "1f600",
    }


def test_build_stripped_index_ambiguous():
    with pytest.raises(AmbiguousCodepointError) as exc_info:
        build_stripped_index({"a": "2764-fe0f", "b": "2764"})

    assert (exc_info.value.existing, exc_info.value.new) == ("2764-fe0f", "2764")


def test_reconcile_thumbsup():
    assert reconcile({"thumbsup": "1f44d"}, {"thumbs_up": "1f44d-fe0f"}) == {"thumbsup": "1f44d-fe0f"}


def test_reconcile():
    assert reconcile(GITHUB_DATA, UNICODE_DATA) == {
        "thumbsup": "1f44d-fe0f",
        "+1": "1f44d-fe0f",
        "hash": "23-fe0f-20e3",
        "family_man_woman_girl": "1f468-200d-1f469-200d-1f467",
        "thumbs_up_light_skin_tone": "1f44d-1f3fb",
        "grinning_face": "1f600",
    }


def test_reconcile_unmatched_vendor_entry():
    with pytest.raises(UnmatchedVendorEntryError) as exc_info:
        reconcile({"thumbsup": "1f44d", "unknown": "1f9ff-1f9ff"}, UNICODE_DATA)

    assert (exc_info.value.name, exc_info.value.codepoints) == ("unknown", "1f9ff-1f9ff")


def test_reconcile_unicode_name_collision():
    result = reconcile({"grinning_face": "1f44d"}, {"thumbs_up": "1f44d", "grinning_face": "1f600"})

    assert result == {"grinning_face": "1f600"}


def test_reconcile_deterministic():
    first = render_mapping(reconcile(GITHUB_DATA, UNICODE_DATA))
    second = render_mapping(reconcile(dict(GITHUB_DATA), dict(UNICODE_DATA)))

    assert first == second
