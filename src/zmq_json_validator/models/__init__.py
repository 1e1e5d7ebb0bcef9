"""Typed record shapes for each JSON publication topic."""

from .chain import (
    ChainMain as ChainMain,
)
from .chain import (
    ChainMainMin as ChainMainMin,
)
from .chain import (
    MinerTx as MinerTx,
)
from .common import (
    Output as Output,
)
from .miner import (
    MinerData as MinerData,
)
from .miner import (
    TxBacklogEntry as TxBacklogEntry,
)
from .txpool import (
    TxPoolAdd as TxPoolAdd,
)
from .txpool import (
    TxPoolAddMin as TxPoolAddMin,
)
