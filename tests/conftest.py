"""Test configuration and fixtures."""

import pytest
import structlog

from feedkit.builders import CategoryBuilder, EnclosureBuilder, GuidBuilder, ItemBuilder

LAS_ENCLOSURE_URL = (
    "http://www.podtrac.com/pts/redirect.ogg/traffic.libsyn.com/jnite/linuxactionshowep408.ogg"
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any structlog configuration a test installed, e.g. via main()."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_rss_content():
    """Sample RSS 2.0 podcast feed with one valid item, one item with a bad
    enclosure and one item with neither title nor description."""
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>The Linux Action Show! OGG</title>
    <link>http://www.jupiterbroadcasting.com/</link>
    <description>Ogg Vorbis audio versions of The Linux Action Show!</description>
    <language>en</language>
    <pubDate>Sun, 13 Mar 2016 20:02:02 -0700</pubDate>
    <category domain="http://www.example.com/categories">Technology</category>
    <ttl>60</ttl>
    <cloud domain="rpc.sys.com" port="80" path="/RPC2" registerProcedure="pingMe" protocol="soap"/>
    <itunes:explicit>yes</itunes:explicit>
    <itunes:category text="Technology"/>
    <item>
      <title>Making Music with Linux | LAS 408</title>
      <link>http://www.jupiterbroadcasting.com/97561/making-music-with-linux-las-408/</link>
      <description>Special Raspberry Pi 3 edition of the show.</description>
      <enclosure url="http://www.podtrac.com/pts/redirect.ogg/traffic.libsyn.com/jnite/linuxactionshowep408.ogg" length="70772893" type="audio/ogg"/>
      <guid isPermaLink="false">9DE46946-2F90-4D5D-9047-7E9165C16E7C</guid>
      <pubDate>Sun, 13 Mar 2016 20:02:02 -0700</pubDate>
      <itunes:duration>01:02:03</itunes:duration>
    </item>
    <item>
      <description>Description-only episode.</description>
      <enclosure url="http://www.example.com/episode.ogg" length="1024" type="not-a-mime"/>
    </item>
    <item>
      <link>http://www.jupiterbroadcasting.com/untitled/</link>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def enclosure():
    """A finalized enclosure."""
    return (
        EnclosureBuilder()
        .url(LAS_ENCLOSURE_URL)
        .length(70772893)
        .mime_type("audio/ogg")
        .validate()
        .finalize()
    )


@pytest.fixture
def guid():
    """A finalized, non-permalink guid."""
    return (
        GuidBuilder()
        .value("9DE46946-2F90-4D5D-9047-7E9165C16E7C")
        .is_permalink(False)
        .validate()
        .finalize()
    )


@pytest.fixture
def category():
    """A finalized category with a domain."""
    return (
        CategoryBuilder()
        .name("Podcast")
        .domain("http://www.example.com/categories")
        .validate()
        .finalize()
    )


@pytest.fixture
def item(enclosure, guid):
    """A finalized item carrying an enclosure and guid."""
    return (
        ItemBuilder()
        .title("Making Music with Linux | LAS 408")
        .link("http://www.jupiterbroadcasting.com/97561/making-music-with-linux-las-408/")
        .enclosure(enclosure)
        .guid(guid)
        .validate()
        .finalize()
    )
