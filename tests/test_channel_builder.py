"""Unit tests for ChannelBuilder."""

import pytest

from feedkit.builders import (
    ChannelBuilder,
    CloudBuilder,
    ImageBuilder,
    ItemBuilder,
    ITunesChannelExtensionBuilder,
    TextInputBuilder,
)
from feedkit.exceptions import (
    InvalidDateError,
    InvalidUrlError,
    MissingFieldError,
    NegativeValueError,
    OutOfRangeError,
)

LINK = "http://www.jupiterbroadcasting.com/"


def valid_builder() -> ChannelBuilder:
    return (
        ChannelBuilder()
        .title("The Linux Action Show! OGG")
        .link(LINK)
        .description("Ogg Vorbis audio versions of The Linux Action Show!")
    )


class TestChannelBuilderRoundTrip:
    """Setter values come back unchanged from the finalized Channel."""

    def test_scalar_fields(self):
        channel = (
            valid_builder()
            .language("en")
            .copyright("Copyright 2002, Spartanburg Herald-Journal")
            .managing_editor("chris@jupiterbroadcasting.com (Chris Fisher)")
            .webmaster("webmaster@jupiterbroadcasting.com")
            .pub_date("Sun, 13 Mar 2016 20:02:02 -0700")
            .last_build_date("Sun, 13 Mar 2016 20:02:02 -0700")
            .generator("Feeder 2.5.12")
            .docs("http://blogs.law.harvard.edu/tech/rss")
            .rating("(PICS-1.1 \"http://www.rsac.org/ratingsv01.html\")")
            .ttl(60)
            .validate()
            .finalize()
        )

        assert channel.title == "The Linux Action Show! OGG"
        assert channel.link == LINK
        assert channel.description == "Ogg Vorbis audio versions of The Linux Action Show!"
        assert channel.language == "en"
        assert channel.copyright == "Copyright 2002, Spartanburg Herald-Journal"
        assert channel.managing_editor == "chris@jupiterbroadcasting.com (Chris Fisher)"
        assert channel.webmaster == "webmaster@jupiterbroadcasting.com"
        assert channel.pub_date == "Sun, 13 Mar 2016 20:02:02 -0700"
        assert channel.last_build_date == "Sun, 13 Mar 2016 20:02:02 -0700"
        assert channel.generator == "Feeder 2.5.12"
        assert channel.docs == "http://blogs.law.harvard.edu/tech/rss"
        assert channel.rating.startswith("(PICS-1.1")
        assert channel.ttl == "60"

    def test_composed_elements(self, item, category):
        cloud = CloudBuilder().domain("http://rpc.sys.com/").port(80).protocol("soap").finalize()
        image = (
            ImageBuilder()
            .url("http://www.jupiterbroadcasting.com/images/LAS-300-Badge.jpg")
            .link(LINK)
            .finalize()
        )
        text_input = TextInputBuilder().link("http://www.jupiterbroadcasting.com/search").finalize()
        itunes_ext = ITunesChannelExtensionBuilder().author("Jupiter Broadcasting").finalize()
        description_only = ItemBuilder().description("Second episode").finalize()

        channel = (
            valid_builder()
            .categories([category])
            .cloud(cloud)
            .image(image)
            .text_input(text_input)
            .items([item, description_only])
            .itunes_ext(itunes_ext)
            .validate()
            .finalize()
        )

        assert channel.categories == (category,)
        assert channel.cloud == cloud
        assert channel.image == image
        assert channel.text_input == text_input
        assert channel.items == (item, description_only)
        assert channel.itunes_ext.author == "Jupiter Broadcasting"

    def test_defaults(self):
        channel = ChannelBuilder().finalize()

        assert channel.title == ""
        assert channel.link == ""
        assert channel.description == ""
        assert channel.language is None
        assert channel.pub_date is None
        assert channel.cloud is None
        assert channel.ttl is None
        assert channel.image is None
        assert channel.text_input is None
        assert channel.itunes_ext is None
        assert channel.categories == ()
        assert channel.skip_hours == ()
        assert channel.skip_days == ()
        assert channel.items == ()

    def test_finalize_without_validate_allows_missing_title(self):
        channel = ChannelBuilder().link(LINK).finalize()
        assert channel.title == ""

    def test_finalize_twice_yields_equal_values(self, item):
        builder = valid_builder().items([item]).skip_hours([1, 2])
        assert builder.finalize() == builder.finalize()


class TestChannelBuilderRequiredFields:
    """title, link and description are checked first, in that order."""

    def test_missing_title(self):
        with pytest.raises(MissingFieldError) as exc_info:
            ChannelBuilder().link(LINK).description("d").validate()

        assert exc_info.value.field == "Channel.title"

    def test_missing_link(self):
        with pytest.raises(MissingFieldError) as exc_info:
            ChannelBuilder().title("t").description("d").validate()

        assert exc_info.value.field == "Channel.link"

    def test_invalid_link(self):
        with pytest.raises(InvalidUrlError) as exc_info:
            ChannelBuilder().title("t").link("jupiterbroadcasting").description("d").validate()

        assert exc_info.value.field == "Channel.link"

    def test_missing_description(self):
        with pytest.raises(MissingFieldError) as exc_info:
            ChannelBuilder().title("t").link(LINK).validate()

        assert exc_info.value.field == "Channel.description"

    def test_first_error_wins(self):
        builder = ChannelBuilder().ttl(-1).skip_hours([99])

        with pytest.raises(MissingFieldError):
            builder.validate()


class TestChannelBuilderTtl:
    def test_negative_ttl_fails_validate(self):
        with pytest.raises(NegativeValueError) as exc_info:
            valid_builder().ttl(-5).validate()

        assert exc_info.value.field == "Channel.ttl"

    def test_negative_ttl_fails_finalize(self):
        with pytest.raises(NegativeValueError):
            valid_builder().ttl(-5).finalize()

    def test_zero_ttl_is_valid(self):
        assert valid_builder().ttl(0).validate().finalize().ttl == "0"


class TestChannelBuilderSkipHours:
    def test_valid_hours_become_strings(self):
        channel = valid_builder().skip_hours([6, 7, 8, 14, 22]).validate().finalize()
        assert channel.skip_hours == ("6", "7", "8", "14", "22")

    def test_bounds_are_inclusive(self):
        valid_builder().skip_hours([0, 23]).validate()

    def test_hour_out_of_range(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            valid_builder().skip_hours([6, 7, 25]).validate()

        assert exc_info.value.field == "Channel.skip_hours"
        assert exc_info.value.value == 25

    def test_negative_hour(self):
        with pytest.raises(OutOfRangeError):
            valid_builder().skip_hours([-1]).validate()

    def test_negative_hour_fails_finalize(self):
        with pytest.raises(NegativeValueError):
            valid_builder().skip_hours([-1]).finalize()

    @pytest.mark.parametrize("hour", [True, False])
    def test_bool_is_not_an_hour(self, hour):
        with pytest.raises(OutOfRangeError):
            valid_builder().skip_hours([6, hour]).validate()
        with pytest.raises(OutOfRangeError):
            valid_builder().skip_hours([hour]).finalize()


class TestChannelBuilderSkipDays:
    def test_valid_days(self):
        days = ["Monday", "Sunday", "Thursday", "Wednesday"]
        channel = valid_builder().skip_days(days).validate().finalize()
        assert channel.skip_days == tuple(days)

    @pytest.mark.parametrize("day", ["monday", "Mon", "Someday", ""])
    def test_rejects_non_weekday(self, day):
        with pytest.raises(OutOfRangeError) as exc_info:
            valid_builder().skip_days(["Monday", day]).validate()

        assert exc_info.value.value == day


class TestChannelBuilderDates:
    def test_invalid_pub_date(self):
        with pytest.raises(InvalidDateError) as exc_info:
            valid_builder().pub_date("yesterday").validate()

        assert exc_info.value.field == "Channel.pub_date"

    def test_invalid_last_build_date(self):
        with pytest.raises(InvalidDateError) as exc_info:
            valid_builder().last_build_date("2016-03-13").validate()

        assert exc_info.value.field == "Channel.last_build_date"
