from urllib.parse import urlencode

from blogsite.schemas.blog import ShareLinks

FACEBOOK_SHARE_URL = "https://www.facebook.com/sharer/sharer.php"
LINKEDIN_SHARE_URL = "https://www.linkedin.com/shareArticle"
REDDIT_SHARE_URL = "https://www.reddit.com/submit"
TWITTER_SHARE_URL = "https://twitter.com/intent/tweet"


def build_share_links(
    site_url: str, uri: str, title: str, quote: str = ""
) -> ShareLinks:
    """
    Share URLs for a post, one per social network shown under the article.
    """
    url = f"{site_url.rstrip('/')}{uri}"
    return ShareLinks(
        facebook=f"{FACEBOOK_SHARE_URL}?{urlencode({'u': url, 'quote': quote or title})}",
        linkedin=f"{LINKEDIN_SHARE_URL}?"
        + urlencode({"url": url, "mini": "true", "title": title}),
        reddit=f"{REDDIT_SHARE_URL}?{urlencode({'url': url, 'title': title})}",
        twitter=f"{TWITTER_SHARE_URL}?{urlencode({'url': url, 'text': title})}",
    )
