# Closed set of post categories. A tag outside this list fails the build.
TAGS = (
    "aws",
    "circleci",
    "docker",
    "javascript",
    "typescript",
    "microservices",
    "react",
    "terraform",
    "kubernetes",
    "ci/cd",
    "github",
    "neovim",
    "debugging",
    "golang",
    "astro",
)

# Lower-cased tag -> icon identifier used by the post badges
TAG_ICONS = {
    "javascript": "javascript",
    "circleci": "circleci",
    "react": "react",
    "css": "css",
    "aws": "aws",
    "docker": "docker",
    "github": "github",
    "html": "html",
    "linux": "linux",
    "jest": "jest",
    "golang": "golang",
    "kubernetes": "kubernetes",
}

WORDS_PER_MINUTE = 200
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

ROUTES_FILE = "routes.json"
SEARCH_INDEX_FILE = "search-index.json"
