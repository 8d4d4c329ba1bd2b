# bizwordle/domain/models/company.py
from dataclasses import dataclass


@dataclass(frozen=True)
class CompanyRecord:
    name: str            # "Apple", unique across the dataset
    industry: str        # "Technology"
    founded: int         # 1976
    headquarters: str    # "USA", country or region
    fortune_rank: int    # 3 -> lower is bigger, rank 1 is the largest company
    ceo: str             # "Tim Cook"
