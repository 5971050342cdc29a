"""競走馬の繁殖・能力値生成エンジン."""

__version__ = "0.1.0"
