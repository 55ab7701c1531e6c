from __future__ import annotations
from typing import Tuple

# demonstration sentences shipped with the first model, start symbol included
EXAMPLE_SENTENCES: Tuple[str, ...] = (
    "<s> The quick brown fox jumps over the lazy river .",
    "<s> Rockwell International Corp. 's Tulsa unit said it signed a tentative agreement "
    "extending its contract with Boeing Co. to provide structural parts for Boeing 's 747 jetliners .",
    "<s> I saw the man with the telescope .",
    "<s> In the absence of humans , would the Earth enjoy a constant climate over the long term ?",
)
