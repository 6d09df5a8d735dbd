"""Closed tag vocabularies.

Each table maps a lowercase keyword (or hostname) to a canonical label.
Synonyms share a label. Technology names stay in Latin script; general
categories use Japanese labels.
"""

from types import MappingProxyType

# Matched against "title description url" during enrichment
METADATA_KEYWORDS = MappingProxyType(
    {
        # programming languages
        "python": "Python",
        "javascript": "JavaScript",
        "typescript": "TypeScript",
        "java": "Java",
        "c++": "C++",
        "c#": "C#",
        "ruby": "Ruby",
        "php": "PHP",
        "go": "Go",
        "golang": "Go",
        "rust": "Rust",
        "swift": "Swift",
        "kotlin": "Kotlin",
        # frameworks and libraries
        "react": "React",
        "vue": "Vue",
        "angular": "Angular",
        "nodejs": "Node.js",
        "node.js": "Node.js",
        "django": "Django",
        "flask": "Flask",
        "spring": "Spring",
        "laravel": "Laravel",
        "rails": "Rails",
        # platforms
        "github": "GitHub",
        "gitlab": "GitLab",
        "docker": "Docker",
        "kubernetes": "Kubernetes",
        "aws": "AWS",
        "azure": "Azure",
        "gcp": "GCP",
        "google cloud": "GCP",
        # topics
        "ai": "AI",
        "artificial intelligence": "AI",
        "machine learning": "機械学習",
        "deep learning": "ディープラーニング",
        "data science": "データサイエンス",
        "frontend": "フロントエンド",
        "backend": "バックエンド",
        "fullstack": "フルスタック",
        "devops": "DevOps",
        "security": "セキュリティ",
        "database": "データベース",
        "web development": "Web開発",
        "mobile": "モバイル",
        "design": "デザイン",
        "ui": "UI",
        "ux": "UX",
        # content types
        "tutorial": "チュートリアル",
        "guide": "ガイド",
        "documentation": "ドキュメント",
        "blog": "ブログ",
        "article": "記事",
        "video": "動画",
        "course": "講座",
        "tool": "ツール",
        "library": "ライブラリ",
        "framework": "フレームワーク",
        # Japanese keywords
        "チュートリアル": "チュートリアル",
        "ガイド": "ガイド",
        "ドキュメント": "ドキュメント",
        "ブログ": "ブログ",
        "記事": "記事",
        "機械学習": "機械学習",
        "ディープラーニング": "ディープラーニング",
        "データサイエンス": "データサイエンス",
        "フロントエンド": "フロントエンド",
        "バックエンド": "バックエンド",
        "セキュリティ": "セキュリティ",
        "データベース": "データベース",
        "ツール": "ツール",
        "デザイン": "デザイン",
    }
)

# Hostname -> site label. Order matters for substring matches.
DOMAIN_LABELS = MappingProxyType(
    {
        "github.com": "GitHub",
        "stackoverflow.com": "StackOverflow",
        "reddit.com": "Reddit",
        "twitter.com": "Twitter",
        "x.com": "Twitter",
        "youtube.com": "YouTube",
        "youtu.be": "YouTube",
        "medium.com": "Medium",
        "dev.to": "DevTo",
        "qiita.com": "Qiita",
        "zenn.dev": "Zenn",
        "note.com": "Note",
        "amazon.co.jp": "Amazon",
        "amazon.com": "Amazon",
        "wikipedia.org": "Wikipedia",
        "docs.google.com": "GoogleDocs",
        "drive.google.com": "GoogleDrive",
        "notion.so": "Notion",
        "figma.com": "Figma",
        "canva.com": "Canva",
        "discord.com": "Discord",
        "slack.com": "Slack",
        "trello.com": "Trello",
        "asana.com": "Asana",
        "linkedin.com": "LinkedIn",
        "facebook.com": "Facebook",
        "instagram.com": "Instagram",
        "tiktok.com": "TikTok",
        "twitch.tv": "Twitch",
        "spotify.com": "Spotify",
        "soundcloud.com": "SoundCloud",
        "npmjs.com": "npm",
        "pypi.org": "PyPI",
        "docker.com": "Docker",
        "kubernetes.io": "Kubernetes",
        "aws.amazon.com": "AWS",
        "cloud.google.com": "GCP",
        "azure.microsoft.com": "Azure",
    }
)

# Matched against the URL path and query string
PATH_KEYWORDS = MappingProxyType(
    {
        "linux": "Linux",
        "windows": "Windows",
        "macos": "macOS",
        "ios": "iOS",
        "android": "Android",
        "python": "Python",
        "javascript": "JavaScript",
        "typescript": "TypeScript",
        "java": "Java",
        "cpp": "C++",
        "csharp": "C#",
        "ruby": "Ruby",
        "php": "PHP",
        "go": "Go",
        "rust": "Rust",
        "swift": "Swift",
        "kotlin": "Kotlin",
        "react": "React",
        "vue": "Vue",
        "angular": "Angular",
        "nodejs": "Node.js",
        "node": "Node.js",
        "docker": "Docker",
        "kubernetes": "Kubernetes",
        "aws": "AWS",
        "gcp": "GCP",
        "azure": "Azure",
        "ai": "AI",
        "ml": "機械学習",
        "machine-learning": "機械学習",
        "deep-learning": "ディープラーニング",
        "data-science": "データサイエンス",
        "frontend": "フロントエンド",
        "backend": "バックエンド",
        "fullstack": "フルスタック",
        "devops": "DevOps",
        "security": "セキュリティ",
        "database": "データベース",
        "sql": "SQL",
        "nosql": "NoSQL",
        "api": "API",
        "rest": "REST",
        "graphql": "GraphQL",
        "tutorial": "チュートリアル",
        "guide": "ガイド",
        "documentation": "ドキュメント",
        "blog": "ブログ",
        "news": "ニュース",
        "article": "記事",
        "video": "動画",
        "podcast": "ポッドキャスト",
        "tool": "ツール",
        "editor": "エディタ",
        "vscode": "VSCode",
        "vim": "Vim",
        "emacs": "Emacs",
        "git": "Git",
        "github": "GitHub",
        "gitlab": "GitLab",
        "design": "デザイン",
        "ui": "UI",
        "ux": "UX",
        "css": "CSS",
        "html": "HTML",
        "sass": "Sass",
        "tailwind": "TailwindCSS",
        "bootstrap": "Bootstrap",
    }
)

# Matched against the chat message excerpt
CONTENT_KEYWORDS = MappingProxyType(
    {
        "linux": "Linux",
        "windows": "Windows",
        "mac": "macOS",
        "python": "Python",
        "javascript": "JavaScript",
        "typescript": "TypeScript",
        "react": "React",
        "vue": "Vue",
        "angular": "Angular",
        "docker": "Docker",
        "kubernetes": "Kubernetes",
        "ai": "AI",
        "機械学習": "機械学習",
        "チュートリアル": "チュートリアル",
        "ガイド": "ガイド",
        "ツール": "ツール",
        "エディタ": "エディタ",
        "デザイン": "デザイン",
        "セキュリティ": "セキュリティ",
        "データベース": "データベース",
        "フロントエンド": "フロントエンド",
        "バックエンド": "バックエンド",
    }
)

CANONICAL_LABELS = frozenset(
    label
    for table in (METADATA_KEYWORDS, DOMAIN_LABELS, PATH_KEYWORDS, CONTENT_KEYWORDS)
    for label in table.values()
)
