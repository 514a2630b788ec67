from __future__ import annotations

from pathlib import Path

import pytest

from qagen.config import ConfigModel, save_config
from qagen.models import Article


@pytest.fixture
def beauty_articles() -> list[Article]:
    return [
        Article(
            id="101",
            title="冬季保濕重點",
            content="冬天氣候乾燥，保濕精華與乳霜要怎麼挑選，才能讓肌膚整個冬天都水潤不脫皮？",
        ),
        Article(
            id="102",
            title="夏日防曬攻略",
            content="夏天紫外線強烈，防曬乳推薦清單一次看，清爽不黏膩的防曬品這樣選就對了。",
        ),
        Article(
            id="103",
            title="秋冬穿搭提案",
            content="冬天穿搭技巧大公開，毛衣怎麼搭配才顯瘦，大衣與圍巾的配色法則一次學會。",
        ),
        Article(
            id="104",
            title="短文",
            content="太短",
        ),
    ]


@pytest.fixture
def database_csv(tmp_path: Path, beauty_articles: list[Article]) -> Path:
    lines = ["id,title,content,category"]
    for article in beauty_articles:
        lines.append(f'{article.id},{article.title},"{article.content}",beauty')
    path = tmp_path / "articles.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def article_file(tmp_path: Path) -> Path:
    path = tmp_path / "new_article.txt"
    path.write_text("今年冬天穿搭怎麼搭配毛衣？顯瘦技巧推薦給你。", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.yaml"
    save_config(ConfigModel(), path)
    return path
