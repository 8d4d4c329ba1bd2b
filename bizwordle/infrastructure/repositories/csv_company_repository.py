# bizwordle/infrastructure/repositories/csv_company_repository.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import logging

import pandas as pd

from bizwordle.application.ports import CompanyRepository
from bizwordle.domain.models.company import CompanyRecord

_log = logging.getLogger("bizwordle.dataset")

# CSV header -> CompanyRecord attribute, in file order
COLUMNS = {
    "name": "name",
    "industry": "industry",
    "founded": "founded",
    "headquarters": "headquarters",
    "fortuneRank": "fortune_rank",
    "ceo": "ceo",
}


class CsvCompanyRepository(CompanyRepository):
    """
    Reads the company table (e.g. data/companies/bizwordle.csv) once and
    exposes it as a list of CompanyRecord in row order.

    Expected columns:
        name, industry, founded, headquarters, fortuneRank, ceo
    """

    def __init__(self, csv_path: Path) -> None:
        self.csv_path = Path(csv_path)
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Company CSV not found: {self.csv_path}")
        self._cache: Optional[List[CompanyRecord]] = None

    def load_companies(self) -> List[CompanyRecord]:
        if self._cache is None:
            self._cache = self._read()
        return list(self._cache)

    def _read(self) -> List[CompanyRecord]:
        df = pd.read_csv(self.csv_path, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{self.csv_path} is missing required column(s): {', '.join(missing)}")
        if df.empty:
            raise ValueError(f"{self.csv_path} has no company rows")

        for col in ("founded", "fortuneRank"):
            nums = pd.to_numeric(df[col].str.strip(), errors="coerce")
            bad = df.loc[nums.isna() | (nums % 1 != 0), "name"].tolist()
            if bad:
                raise ValueError(f"{self.csv_path}: non-integer '{col}' for {bad}")
            df[col] = nums.astype(int)

        names = df["name"].str.strip()
        if (names == "").any():
            raise ValueError(f"{self.csv_path}: blank company name")
        dupes = sorted(set(names[names.duplicated()]))
        if dupes:
            raise ValueError(f"{self.csv_path}: duplicate company names {dupes}")

        companies: List[CompanyRecord] = []
        for _, r in df.iterrows():
            companies.append(CompanyRecord(
                name=str(r["name"]).strip(),
                industry=str(r["industry"]).strip(),
                founded=int(r["founded"]),
                headquarters=str(r["headquarters"]).strip(),
                fortune_rank=int(r["fortuneRank"]),
                ceo=str(r["ceo"]).strip(),
            ))
        _log.info("Loaded %d companies from %s", len(companies), self.csv_path)
        return companies
