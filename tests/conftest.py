import pytest

from f1news.config import Settings
from f1news.services.cache import FeedCache

FORMULA1_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Formula 1 - Latest News</title>
    <item>
      <title>Verstappen takes pole in Suzuka</title>
      <link>https://www.formula1.com/en/latest/article/pole-suzuka</link>
      <pubDate>Wed, 03 Jan 2024 10:00:00 GMT</pubDate>
      <description><![CDATA[<p>A dominant lap from the champion.</p>]]></description>
      <enclosure url="https://media.formula1.com/pole.jpg" type="image/jpeg" length="0"/>
    </item>
    <item>
      <title>Hamilton reflects on strategy</title>
      <link>https://www.formula1.com/en/latest/article/strategy</link>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
      <description>Strategy talk.</description>
    </item>
    <item>
      <title>Calendar confirmed</title>
      <link>https://www.formula1.com/en/latest/article/calendar</link>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <description>The season calendar.</description>
    </item>
  </channel>
</rss>
"""

MOTORSPORT_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Motorsport.com - Formula 1 - Stories</title>
    <item>
      <title>Team principal hints at upgrades</title>
      <link>https://www.motorsport.com/f1/news/upgrades/</link>
      <pubDate>Fri, 05 Jan 2024 08:00:00 +0000</pubDate>
      <description>Upgrades are coming.</description>
      <media:thumbnail url="https://cdn.motorsport.com/thumb.jpg"/>
    </item>
    <item>
      <title>Rookie signs multi-year deal</title>
      <link>https://www.motorsport.com/f1/news/rookie/</link>
      <pubDate>Thu, 04 Jan 2024 08:00:00 +0000</pubDate>
      <description>A new face on the grid.</description>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def settings() -> Settings:
    return Settings(feed_cache_ttl=300.0)


@pytest.fixture
def cache() -> FeedCache:
    return FeedCache(ttl=300.0)


@pytest.fixture
def formula1_rss() -> str:
    return FORMULA1_RSS


@pytest.fixture
def motorsport_rss() -> str:
    return MOTORSPORT_RSS
