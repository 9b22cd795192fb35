"""Built-in outlet list."""

from typing import List

from .models import OutletConfig, OutletSelectors


def create_default_outlets() -> List[OutletConfig]:
    """Create the default set of front-page outlets."""
    return [
        OutletConfig(
            name="CNN",
            url="https://www.cnn.com",
            selectors=OutletSelectors(
                headlines=".container_lead-plus-headlines__headline, .card__headline",
                summary=".container__text-wrapper",
            ),
        ),
        OutletConfig(
            name="BBC",
            url="https://www.bbc.com/news",
            selectors=OutletSelectors(
                headlines=".gs-c-promo-heading",
                summary=".gs-c-promo-summary",
            ),
        ),
        OutletConfig(
            name="Reuters",
            url="https://www.reuters.com",
            selectors=OutletSelectors(
                headlines=".media-story-card__body__3tRWy",
                links="a.media-story-card__heading__eqhp9",
                title=".media-story-card__heading__eqhp9",
                summary=".media-story-card__description__27vSx",
            ),
        ),
        OutletConfig(
            name="AP News",
            url="https://apnews.com",
            selectors=OutletSelectors(
                headlines=".PagePromo-title, .CardHeadline",
                summary=".PagePromo-description, .CardDescription",
            ),
        ),
        OutletConfig(
            name="Al Jazeera",
            url="https://www.aljazeera.com",
            selectors=OutletSelectors(
                headlines=".gc__title, .fte-article__title",
                summary=".gc__excerpt, .fte-article__excerpt",
            ),
        ),
        OutletConfig(
            name="The Guardian",
            url="https://www.theguardian.com/us",
            selectors=OutletSelectors(
                headlines=".fc-item__title, .dcr-12fpzem",
                summary=".fc-item__standfirst, .dcr-1989ovb",
            ),
        ),
        OutletConfig(
            name="NPR",
            url="https://www.npr.org/sections/news/",
            selectors=OutletSelectors(
                headlines=".title, .storytitle",
                summary=".teaser, .storydescription",
            ),
        ),
        OutletConfig(
            name="CNBC",
            url="https://www.cnbc.com",
            selectors=OutletSelectors(
                headlines=".Card-title, .RiverHeadline-headline",
                summary=".Card-description, .RiverHeadline-description",
            ),
        ),
        OutletConfig(
            name="Fox News",
            url="https://www.foxnews.com",
            selectors=OutletSelectors(
                headlines=".title, .article-list__article__headline",
                summary=".content, .article-list__article__dek",
            ),
        ),
        OutletConfig(
            name="The New York Times",
            url="https://www.nytimes.com",
            selectors=OutletSelectors(
                headlines="h2, h3, .indicate-hover",
                summary="p, .summary",
            ),
        ),
    ]
