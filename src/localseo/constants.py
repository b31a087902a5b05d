# src/localseo/constants.py
"""Centralized rule tables for the structured data audit.

The evaluator, the missing-schema detector and the JSON-LD synthesizer read
their business rules from here. For user-configurable runtime settings, see
config.py.
"""

# =============================================================================
# Evaluation Display Labels
# =============================================================================

EVAL_DISPLAY_GOOD = "✅ 良好"
EVAL_DISPLAY_WARNING = "⚠️ 不足あり"
EVAL_DISPLAY_ERROR = "❌ 重大な問題"


# =============================================================================
# Local Business Rules
# =============================================================================

# Types treated as the local-business family (FuneralHome derives from LocalBusiness)
LOCAL_BUSINESS_TYPES = frozenset({
    "FuneralHome",
    "LocalBusiness",
    "Organization",
    "ProfessionalService",
    "HealthAndBeautyBusiness",
})

# Any type containing this substring is also evaluated as a local business
LOCAL_BUSINESS_TYPE_MARKER = "Business"

LOCAL_BUSINESS_REQUIRED = frozenset({
    "name",
    "address",
    "telephone",
})

LOCAL_BUSINESS_RECOMMENDED = frozenset({
    "openingHours",
    "url",
    "image",
    "priceRange",
    "geo",
    "sameAs",
    "description",
    "areaServed",
})

# Industry-specific subtype used for synthesized local business JSON-LD
DEFAULT_BUSINESS_TYPE = "FuneralHome"

# Gap label reported when no local-business family type is found
LOCAL_BUSINESS_GAP_LABEL = "LocalBusiness / FuneralHome"


# =============================================================================
# Other Type Rules
# =============================================================================

BREADCRUMB_TYPE = "BreadcrumbList"
FAQ_TYPE = "FAQPage"

# Minimum number of FAQ entries for a FAQPage to be rated good
MIN_FAQ_ENTRIES = 3


# =============================================================================
# Content Indicators
# =============================================================================

FAQ_INDICATORS = ("よくある質問", "FAQ", "Q&A", "Q.", "A.")

REVIEW_INDICATORS = ("口コミ", "レビュー", "評価", "評判", "星", "★")


# =============================================================================
# Missing Schema Reasons
# =============================================================================

REASON_LOCAL_BUSINESS = "ローカルSEOの最重要Schema。Googleマップ表示に直結。"
REASON_BREADCRUMB = "パンくずリッチスニペット。検索結果のURLをパス表示に変換してCTR向上。"
REASON_FAQ = "FAQコンテンツが存在するがSchemaなし。FAQ形式のリッチスニペットが取得可能。"
REASON_AGGREGATE_RATING = "口コミ・評価コンテンツがあるがSchema未実装。星評価スニペット取得可能。"
REASON_SERVICE = "提供サービスをSchema化することでリッチスニペット取得の可能性。"
REASON_WEBSITE = "サイト検索ボックス（SiteLinksSearchBox）の有効化に必要。"
REASON_IMAGE_OBJECT = "画像のSEO強化。Googleの画像検索での表示改善。"


# =============================================================================
# Evaluation Notes
# =============================================================================

NOTE_ALL_PROPERTIES_PRESENT = "必須・推奨プロパティすべて揃っています"
NOTE_MISSING_RECOMMENDED = "推奨プロパティ不足: {}"
NOTE_MISSING_REQUIRED = "必須プロパティ不足: {}"
NOTE_BREADCRUMB_EMPTY = "itemListElement が空または未設定"
NOTE_FAQ_COUNT = "FAQ {} 件"
NOTE_FAQ_TOO_FEW = "FAQ件数が少ない（{}件）"
NOTE_EMPTY_PROPERTIES = "プロパティが空です"
NOTE_PROPERTY_COUNT = "{}個のプロパティ"
NOTE_JSON_PARSE_ERROR = "JSONパースエラー: {}"


# =============================================================================
# Extraction Constants
# =============================================================================

UNKNOWN_SCHEMA_TYPE = "不明"
PARSE_ERROR_SCHEMA_TYPE = "(JSON解析エラー)"

# Separator used when a JSON-LD node declares several @type values
TYPE_JOIN_SEPARATOR = " / "

# Preview lengths for raw snippets
MAX_RAW_SNIPPET_LENGTH = 500
MAX_PARSE_ERROR_SNIPPET_LENGTH = 200

# Truncation length for parse error descriptions
MAX_PARSE_ERROR_MESSAGE_LENGTH = 100

# Truncation length for microdata/RDFa text values
MAX_PROPERTY_TEXT_LENGTH = 100


# =============================================================================
# Synthesizer Placeholders
# =============================================================================

SCHEMA_CONTEXT = "https://schema.org"
SNIPPET_PRIORITY_HIGH = "high"

PLACEHOLDER_NAME = "（サイトタイトルから取得）"
PLACEHOLDER_TELEPHONE = "（電話番号を入力）"
PLACEHOLDER_STREET_ADDRESS = "（住所を入力）"
PLACEHOLDER_POSTAL_CODE = "（郵便番号を入力）"
PLACEHOLDER_REGION = "（都道府県を入力）"
PLACEHOLDER_IMAGE = "（OGP画像URLを入力）"
PLACEHOLDER_DESCRIPTION = "（メタディスクリプションを入力）"
PLACEHOLDER_SAME_AS = (
    "（GoogleビジネスプロフィールURLを入力）",
    "（FacebookページURLを入力）",
)
PLACEHOLDER_PAGE_NAME = "（現在のページ名を入力）"
PLACEHOLDER_PAGE_URL = "（現在のページURLを入力）"
PLACEHOLDER_FAQ_QUESTION = "（FAQの質問{}を入力）"
PLACEHOLDER_FAQ_ANSWER = "（FAQの回答{}を入力）"

DEFAULT_COUNTRY = "JP"
DEFAULT_PRICE_RANGE = "¥¥"
DEFAULT_OPENS = "00:00"
DEFAULT_CLOSES = "23:59"
ALL_WEEK_DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
BREADCRUMB_HOME_NAME = "ホーム"

# Number of placeholder question/answer pairs in the FAQPage template
FAQ_TEMPLATE_ENTRIES = 2


# =============================================================================
# Reporting Constants
# =============================================================================

# Property names listed per item in the Markdown report
REPORT_MAX_PROPERTY_NAMES = 6

PRIORITY_DISPLAY = {
    "high": "**高**",
    "mid": "中",
    "low": "低",
}
