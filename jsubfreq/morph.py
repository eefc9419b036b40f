"""形態素解析器(分かち書き)の生成。

優先度:
- fugashi(MeCab) + unidic系 があればそれを利用
- なければ Janome にフォールバック

どちらも生成できなければ TokenizerUnavailable。辞書が無い/壊れている場合も同様。
"""
from __future__ import annotations
from typing import Any, Callable, List

BACKENDS = ("auto", "fugashi", "janome")


class TokenizerUnavailable(RuntimeError):
    pass


class Tokenizer:
    """分かち書きのみを提供する薄いラッパー。"""

    def __init__(self, name: str, impl: Any, split: Callable[[Any, str], List[str]]):
        self.name = name
        self._impl = impl
        self._split = split

    def wakati(self, text: str) -> List[str]:
        if not text:
            return []
        return self._split(self._impl, text)

    def __repr__(self) -> str:
        return f"Tokenizer({self.name})"


def _fugashi_split(tagger, text: str) -> List[str]:
    return [w.surface for w in tagger(text)]


def _janome_split(tokenizer, text: str) -> List[str]:
    return list(tokenizer.tokenize(text, wakati=True))


def _load_fugashi() -> Tokenizer:
    from fugashi import Tagger  # type: ignore
    return Tokenizer("fugashi", Tagger(), _fugashi_split)


def _load_janome() -> Tokenizer:
    from janome.tokenizer import Tokenizer as JanomeTokenizer  # type: ignore
    return Tokenizer("janome", JanomeTokenizer(), _janome_split)


_LOADERS = {
    "fugashi": _load_fugashi,
    "janome": _load_janome,
}


def load_tokenizer(backend: str = "auto") -> Tokenizer:
    if backend not in BACKENDS:
        raise ValueError(f"unknown tokenizer backend: {backend!r}")
    names = ["fugashi", "janome"] if backend == "auto" else [backend]
    errors = []
    for name in names:
        try:
            return _LOADERS[name]()
        except Exception as e:  # ImportError / 辞書ロード失敗(RuntimeError等)
            errors.append(f"{name}: {e}")
    raise TokenizerUnavailable("no tokenizer could be loaded (" + "; ".join(errors) + ")")


def is_available(backend: str = "auto") -> bool:
    try:
        load_tokenizer(backend)
    except TokenizerUnavailable:
        return False
    return True


__all__ = ["BACKENDS", "Tokenizer", "TokenizerUnavailable", "load_tokenizer", "is_available"]
