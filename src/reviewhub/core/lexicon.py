"""Keyword dictionaries driving aspect, sentiment and request detection.

The tables are plain data. Every algorithm in ``reviewhub.core`` receives a
``Lexicon`` instance, so the dictionaries can be replaced from a YAML file
without touching the scoring code.
"""

import logging
import re
from dataclasses import dataclass, field, asdict
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Pattern, Tuple

import yaml

from .config import settings

logger = logging.getLogger(__name__)


# Aspect taxonomy. Order matters: classification ties keep the first aspect.
ASPECT_KEYWORDS: Dict[str, List[str]] = {
    "品質": ["品質", "作り", "仕上げ", "素材", "質感", "縫製", "精度", "質", "出来", "クオリティ", "性能", "機能"],
    "耐久性": ["バッテリー", "充電", "寿命", "壊れ", "故障", "劣化", "耐久", "持ち", "電池", "断線", "剥がれ", "割れ", "破損", "摩耗"],
    "操作性": ["ボタン", "操作", "タッチ", "反応", "設定", "接続", "ペアリング", "Bluetooth", "使い方", "スイッチ", "切替", "UI", "アプリ", "リモコン"],
    "デザイン": ["デザイン", "見た目", "色", "サイズ", "形", "重さ", "大きさ", "小さ", "軽", "重", "コンパクト", "薄", "スタイリッシュ", "おしゃれ", "カラー"],
    "価格": ["価格", "値段", "コスパ", "コストパフォーマンス", "安い", "高い", "金額", "円", "お買い得", "お値打ち", "割安", "割高"],
    "音質": ["音質", "音", "サウンド", "低音", "高音", "中音", "ノイズ", "クリア", "雑音", "音漏れ", "ノイキャン", "ノイズキャンセリング", "マイク", "通話"],
    "装着感": ["フィット", "装着", "着け心地", "履き心地", "肌触り", "つけ心地", "耳", "痛い", "痛く", "フィット感", "着心地", "蒸れ", "締め付け"],
    "配送": ["配送", "梱包", "届", "発送", "包装", "到着", "遅い", "早い", "速い", "迅速", "丁寧"],
    "サポート": ["対応", "サポート", "説明書", "カスタマー", "保証", "マニュアル", "サービス", "アフター", "返品", "交換", "問い合わせ"],
}

POSITIVE_EXPRESSIONS: List[str] = [
    "良い", "よい", "いい", "良かった", "よかった", "良く",
    "素晴らしい", "すばらしい", "最高", "完璧", "優秀", "優れ",
    "満足", "気に入", "快適", "便利", "楽",
    "おすすめ", "お勧め", "オススメ",
    "使いやすい", "使い易い", "わかりやすい", "分かりやすい",
    "しっかり", "丈夫", "頑丈", "安心", "安定",
    "コスパ最高", "コスパが良", "コスパ良", "お買い得", "お値打ち",
    "高性能", "多機能", "高品質",
    "期待通り", "期待以上", "想像以上", "思った以上",
    "綺麗", "きれい", "キレイ", "美しい",
    "軽い", "軽く", "コンパクト",
    "クリア", "鮮明", "鮮やか",
    "静か", "静音",
    "フィット", "ぴったり", "ピッタリ",
    "迅速", "丁寧", "親切",
    "感動", "嬉しい", "うれしい",
    "問題ない", "問題なく", "問題なし",
    "十分", "充分",
]

NEGATIVE_EXPRESSIONS: List[str] = [
    "悪い", "ダメ", "だめ", "イマイチ", "いまいち", "微妙",
    "最悪", "ひどい", "酷い",
    "不良", "不良品", "壊れ", "故障", "破損", "割れ",
    "使いにくい", "使い辛い", "使いづらい", "わかりにくい", "分かりにくい",
    "不便", "面倒", "手間",
    "高い", "高すぎ", "割高",
    "安っぽい", "チープ", "ちゃち",
    "残念", "がっかり", "ガッカリ", "期待外れ", "期待はずれ",
    "重い", "重たい", "でかい", "デカい", "大きすぎ",
    "うるさい", "やかましい",
    "痛い", "痛く",
    "不満", "不安",
    "遅い", "遅く", "時間がかかる",
    "切れ", "途切れ", "繋がら", "つながら",
    "持たない", "持たなく", "もたない",
    "合わない", "合わなかった",
    "返品", "返金", "交換",
    "二度と", "後悔",
    "誤反応", "誤作動", "反応しない", "反応が悪",
    "すぐ壊れ", "すぐに壊れ",
    "足りない", "不足",
]

NEGATION_WORDS: List[str] = [
    "ない", "なかった", "ません", "ず", "ぬ", "ではない", "じゃない", "しない", "できない", "なく", "なさ",
]

# "I wish it had...", "would be nice if...", "please improve...", "a bit more..."
REQUEST_PATTERNS: List[str] = [
    r"してほしい",
    r"してほしかった",
    r"してくれたら",
    r"してくれれば",
    r"だったらよかった",
    r"だったら良かった",
    r"だったら良いのに",
    r"があれば",
    r"があったら",
    r"を改善",
    r"を改良",
    r"だと嬉しい",
    r"だとうれしい",
    r"だと助かる",
    r"にしてほしい",
    r"にしてくれれば",
    r"もう少し",
    r"もっと.{1,15}(ば|たら|ほしい|てほしい)",
    r"が足りない",
    r"が欲しい",
    r"がほしい",
    r"たらいいのに",
    r"ればいいのに",
    r"てくれると",
    r"だといい",
]

# Whole-text scorer tables (weighted, separate from the sentence-level lists)
WEIGHTED_POSITIVE_WORDS: Dict[str, int] = {
    # quality / satisfaction
    "素晴らしい": 3, "すばらしい": 3, "最高": 3, "完璧": 3, "優秀": 3,
    "良い": 2, "よい": 2, "いい": 2, "良かった": 2, "よかった": 2,
    "気に入": 2, "満足": 2, "大満足": 3, "嬉しい": 2, "うれしい": 2,
    "快適": 2, "便利": 2, "重宝": 2, "使いやすい": 2,
    "美味しい": 2, "おいしい": 2, "旨い": 2, "うまい": 2,
    "丁寧": 2, "綺麗": 2, "きれい": 2, "キレイ": 2,
    "お得": 2, "コスパ": 1, "お値打ち": 2,
    "迅速": 2, "早い": 1, "速い": 1, "スムーズ": 2,
    # recommendation
    "おすすめ": 2, "オススメ": 2, "お勧め": 2, "リピート": 2, "リピ": 1,
    "また買": 2, "また購入": 2, "また利用": 2,
    # emotion
    "感動": 3, "感激": 3, "感謝": 2, "ありがとう": 1,
    "楽しい": 2, "楽しめ": 2, "幸せ": 2, "嬉し": 2,
    "安心": 2, "信頼": 2, "丈夫": 2, "しっかり": 1,
    # looks
    "おしゃれ": 2, "オシャレ": 2, "かわいい": 2, "カワイイ": 2,
    "かっこいい": 2, "カッコイイ": 2, "スタイリッシュ": 2,
    "高級感": 2, "上品": 2, "素敵": 2, "ステキ": 2,
    # features
    "高性能": 2, "多機能": 2, "高品質": 2, "期待通り": 2,
    "期待以上": 3, "想像以上": 3, "思った以上": 2,
}

WEIGHTED_NEGATIVE_WORDS: Dict[str, int] = {
    # quality / dissatisfaction
    "最悪": -3, "ひどい": -3, "酷い": -3, "悪い": -2, "ダメ": -2,
    "不良": -2, "不良品": -3, "壊れ": -2, "故障": -2, "破損": -2,
    "残念": -2, "がっかり": -2, "ガッカリ": -2, "期待外れ": -3,
    "不満": -2, "不便": -2, "使いづらい": -2, "使いにくい": -2,
    "微妙": -1, "いまいち": -2, "イマイチ": -2,
    "まずい": -2, "不味い": -2,
    # cost
    "高い": -1, "割高": -2, "コスパ悪": -2, "値段の割": -1,
    "安っぽい": -2, "チープ": -2,
    # shipping / support
    "遅い": -1, "遅すぎ": -2, "届かない": -2, "配送遅": -2,
    "対応が悪": -2, "不親切": -2, "雑": -1,
    # defects
    "匂い": -1, "臭い": -2, "くさい": -2,
    "汚れ": -1, "汚い": -2, "シミ": -1, "傷": -1,
    "小さい": -1, "大きすぎ": -1, "サイズが合": -1,
    "薄い": -1, "ペラペラ": -2, "すぐ壊れ": -3,
    # emotion
    "後悔": -2, "失敗": -2, "無駄": -2, "意味ない": -2, "意味がない": -2,
    "二度と": -3, "返品": -2, "返金": -2, "交換": -1,
}

TEXT_NEGATION_WORDS: List[str] = ["ない", "なかった", "ません", "ず", "ぬ", "ん", "ではない", "じゃない", "しない"]
TEXT_NEGATION_PREFIXES: List[str] = ["不", "非"]


@dataclass
class Lexicon:
    """All dictionaries used by the analysis engine."""
    aspects: Dict[str, List[str]] = field(default_factory=lambda: {k: list(v) for k, v in ASPECT_KEYWORDS.items()})
    positive_expressions: List[str] = field(default_factory=lambda: list(POSITIVE_EXPRESSIONS))
    negative_expressions: List[str] = field(default_factory=lambda: list(NEGATIVE_EXPRESSIONS))
    negation_words: List[str] = field(default_factory=lambda: list(NEGATION_WORDS))
    request_patterns: List[str] = field(default_factory=lambda: list(REQUEST_PATTERNS))
    weighted_positive: Dict[str, int] = field(default_factory=lambda: dict(WEIGHTED_POSITIVE_WORDS))
    weighted_negative: Dict[str, int] = field(default_factory=lambda: dict(WEIGHTED_NEGATIVE_WORDS))
    text_negation_words: List[str] = field(default_factory=lambda: list(TEXT_NEGATION_WORDS))
    text_negation_prefixes: List[str] = field(default_factory=lambda: list(TEXT_NEGATION_PREFIXES))

    def __post_init__(self):
        self.compiled_request_patterns: Tuple[Pattern, ...] = tuple(
            re.compile(p) for p in self.request_patterns
        )

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Lexicon":
        """Build a lexicon, keeping defaults for any table the mapping omits."""
        defaults = cls()
        values = {}
        for name in defaults.to_dict():
            value = data.get(name)
            values[name] = value if value else getattr(defaults, name)
        return cls(**values)


DEFAULT_LEXICON = Lexicon()


def load_lexicon(path) -> Lexicon:
    """Load a lexicon from YAML, falling back to the defaults on any problem."""
    try:
        lexicon_file = Path(path)
        if not lexicon_file.exists():
            logger.warning(f"Lexicon file {lexicon_file} not found, using defaults")
            return Lexicon()
        with open(lexicon_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logger.warning(f"Lexicon file {lexicon_file} is not a mapping, using defaults")
            return Lexicon()
        return Lexicon.from_dict(data)
    except (OSError, yaml.YAMLError, re.error, TypeError) as e:
        logger.warning(f"Failed to load lexicon from {path}: {e}. Using defaults.")
        return Lexicon()


def dump_lexicon(lexicon: Lexicon, path) -> None:
    """Write a lexicon to YAML so it can be edited and loaded back."""
    lexicon_file = Path(path)
    lexicon_file.parent.mkdir(parents=True, exist_ok=True)
    with open(lexicon_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(lexicon.to_dict(), f, allow_unicode=True, sort_keys=False, default_flow_style=False)


@lru_cache(maxsize=None)
def _cached_lexicon(path: str) -> Lexicon:
    return load_lexicon(path) if path else DEFAULT_LEXICON


def get_lexicon() -> Lexicon:
    """Lexicon selected by ``settings.lexicon_file`` (built-in tables if unset)."""
    return _cached_lexicon(settings.lexicon_file)
