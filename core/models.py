# models.py
# Definições de dataclasses e modelos de domínio

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Mapping

# Campos editáveis no formulário, na ordem em que aparecem
FORM_FIELDS = ("name", "shirt", "pants", "phone")
REQUIRED_FIELDS = ("name", "shirt", "pants")


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    shirt: str
    pants: str
    phone: str
    created_at: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        """Cria um Customer a partir de uma linha do banco (dict ou sqlite3.Row)."""
        return cls(
            id=str(row["id"]),
            name=row["name"] or "",
            shirt=row["shirt"] or "",
            pants=row["pants"] or "",
            phone=row["phone"] or "",
            created_at=str(row["created_at"] or ""),
        )


@dataclass(frozen=True)
class CustomerFields:
    name: str = ""
    shirt: str = ""
    pants: str = ""
    phone: str = ""

    @classmethod
    def empty(cls) -> "CustomerFields":
        return cls()

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerFields":
        return cls(
            name=customer.name,
            shirt=customer.shirt,
            pants=customer.pants,
            phone=customer.phone,
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def stripped(self) -> "CustomerFields":
        return CustomerFields(
            name=self.name.strip(),
            shirt=self.shirt.strip(),
            pants=self.pants.strip(),
            phone=self.phone.strip(),
        )

    def missing_required(self) -> List[str]:
        """Retorna os campos obrigatórios vazios (ignorando espaços)."""
        return [f for f in REQUIRED_FIELDS if not getattr(self, f).strip()]
