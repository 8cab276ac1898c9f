"""Unit tests for the iTunes extension builders."""

import pytest

from feedkit.builders import (
    ITunesCategoryBuilder,
    ITunesChannelExtensionBuilder,
    ITunesItemExtensionBuilder,
    ITunesOwnerBuilder,
)
from feedkit.exceptions import (
    FeedValidationError,
    InvalidUrlError,
    MissingFieldError,
    OutOfRangeError,
)
from feedkit.models import ITunesCategory


class TestITunesCategoryBuilder:
    """Tests for ITunesCategoryBuilder."""

    def test_nested_subcategory(self):
        subcategory = ITunesCategoryBuilder().text("Software How-To").validate().finalize()
        category = (
            ITunesCategoryBuilder()
            .text("Technology")
            .subcategory(subcategory)
            .validate()
            .finalize()
        )

        assert category.text == "Technology"
        assert category.subcategory == subcategory
        assert category.subcategory.subcategory is None

    def test_rejects_empty_text(self):
        with pytest.raises(MissingFieldError) as exc_info:
            ITunesCategoryBuilder().validate()

        assert exc_info.value.field == "ITunesCategory.text"

    def test_rejects_empty_subcategory_text(self):
        builder = ITunesCategoryBuilder().text("Technology").subcategory(ITunesCategory())

        with pytest.raises(MissingFieldError) as exc_info:
            builder.validate()

        assert exc_info.value.field == "ITunesCategory.subcategory.text"


class TestITunesOwnerBuilder:
    def test_round_trip(self):
        owner = ITunesOwnerBuilder().name("name").email("email@example.com").validate().finalize()

        assert owner.name == "name"
        assert owner.email == "email@example.com"

    def test_defaults(self):
        owner = ITunesOwnerBuilder().finalize()
        assert owner.name is None
        assert owner.email is None


class TestITunesChannelExtensionBuilder:
    """Tests for ITunesChannelExtensionBuilder."""

    def _full_builder(self) -> ITunesChannelExtensionBuilder:
        owner = ITunesOwnerBuilder().name("name").email("email@example.com").finalize()
        category = ITunesCategoryBuilder().text("Technology").finalize()
        return (
            ITunesChannelExtensionBuilder()
            .author("author")
            .block("yes")
            .image("http://www.example.com/artwork.jpg")
            .explicit("clean")
            .subtitle("subtitle")
            .summary("summary")
            .keywords("linux, podcast")
            .new_feed_url("http://www.example.com/new-feed.xml")
            .complete("yes")
            .owner(owner)
            .categories([category])
        )

    def test_round_trip(self):
        ext = self._full_builder().validate().finalize()

        assert ext.author == "author"
        assert ext.block == "yes"
        assert ext.image == "http://www.example.com/artwork.jpg"
        assert ext.explicit == "clean"
        assert ext.subtitle == "subtitle"
        assert ext.summary == "summary"
        assert ext.keywords == "linux, podcast"
        assert ext.new_feed_url == "http://www.example.com/new-feed.xml"
        assert ext.complete == "yes"
        assert ext.owner.email == "email@example.com"
        assert [c.text for c in ext.categories] == ["Technology"]

    def test_finalize_copies_free_form_values(self):
        ext = ITunesChannelExtensionBuilder().explicit("explicit").image("image").finalize()

        assert ext.explicit == "explicit"
        assert ext.image == "image"

    def test_validate_rejects_unknown_explicit_value(self):
        with pytest.raises(OutOfRangeError):
            self._full_builder().explicit("explicit").validate()

    def test_explicit_is_case_insensitive(self):
        self._full_builder().explicit("Yes").validate()

    def test_validate_rejects_bad_image(self):
        with pytest.raises(InvalidUrlError) as exc_info:
            self._full_builder().image("artwork.jpg").validate()

        assert exc_info.value.field == "ITunesChannelExtension.image"

    def test_validate_rejects_bad_new_feed_url(self):
        with pytest.raises(InvalidUrlError):
            self._full_builder().new_feed_url("new-feed.xml").validate()

    def test_validate_checks_every_category(self):
        categories = [ITunesCategory(text="Technology"), ITunesCategory()]

        with pytest.raises(MissingFieldError) as exc_info:
            self._full_builder().categories(categories).validate()

        assert exc_info.value.field == "ITunesChannelExtension.categories[1].text"


class TestITunesItemExtensionBuilder:
    """Tests for ITunesItemExtensionBuilder."""

    def test_round_trip(self):
        ext = (
            ITunesItemExtensionBuilder()
            .author("author")
            .block("no")
            .image("http://www.example.com/episode.jpg")
            .duration("1:02:03")
            .explicit("no")
            .closed_captioned("Yes")
            .order("2")
            .subtitle("subtitle")
            .summary("summary")
            .keywords("keywords")
            .validate()
            .finalize()
        )

        assert ext.author == "author"
        assert ext.block == "no"
        assert ext.image == "http://www.example.com/episode.jpg"
        assert ext.duration == "1:02:03"
        assert ext.explicit == "no"
        assert ext.closed_captioned == "Yes"
        assert ext.order == "2"
        assert ext.subtitle == "subtitle"
        assert ext.summary == "summary"
        assert ext.keywords == "keywords"

    @pytest.mark.parametrize("duration", ["3723", "62:03", "01:02:03"])
    def test_accepts_duration_forms(self, duration):
        ITunesItemExtensionBuilder().duration(duration).validate()

    @pytest.mark.parametrize("duration", ["duration", "1:2:3:4", "01:75"])
    def test_rejects_malformed_duration(self, duration):
        with pytest.raises(FeedValidationError) as exc_info:
            ITunesItemExtensionBuilder().duration(duration).validate()

        assert exc_info.value.field == "ITunesItemExtension.duration"

    def test_rejects_non_numeric_order(self):
        with pytest.raises(OutOfRangeError):
            ITunesItemExtensionBuilder().order("order").validate()

    @pytest.mark.parametrize("order", ["²", "١٢", "3\n", "-1"])
    def test_rejects_non_ascii_digit_order(self, order):
        with pytest.raises(OutOfRangeError) as exc_info:
            ITunesItemExtensionBuilder().order(order).validate()

        assert exc_info.value.field == "ITunesItemExtension.order"

    def test_all_fields_default_to_none(self):
        ext = ITunesItemExtensionBuilder().validate().finalize()
        assert all(value is None for value in ext.model_dump().values())
