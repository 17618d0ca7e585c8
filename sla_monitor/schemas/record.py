"""
Purchase order fulfillment record schemas.
Represents rows as delivered by the fulfillment endpoint and after enrichment.
"""

from typing import Any, Dict, FrozenSet, Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from sla_monitor.utils import coerce_numeric, numeric_source_text


NUMERIC_FIELDS = ("quantity_ordered", "quantity_received", "order_value", "received_value")


def _wire(*aliases: str, default: Any = None) -> Any:
    """Field accepting several wire keys; the first one is used when dumping by alias."""
    return Field(
        default=default,
        validation_alias=AliasChoices(*aliases),
        serialization_alias=aliases[0],
    )


class PurchaseOrderRecord(BaseModel):
    """A single purchase order line as ingested from the endpoint."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    purchase_order_number: Optional[str] = _wire("nomorPO", "purchaseOrderNumber", "purchase_order_number")
    item_code: Optional[str] = _wire("itemCode", "item_code")
    item_name: Optional[str] = _wire("itemName", "item_name")
    supplier_name: Optional[str] = _wire("supplierName", "supplier_name")
    contract: Optional[str] = _wire("contract")
    purchase_order_date: Optional[str] = _wire("poDate", "purchaseOrderDate", "purchase_order_date")
    received_date: Optional[str] = _wire("receivedDate", "received_date")
    quantity_ordered: float = _wire("qtyPO", "quantityOrdered", "quantity_ordered", default=0.0)
    quantity_received: float = _wire("qtyReceived", "quantityReceived", "quantity_received", default=0.0)
    order_value: float = _wire("poValue", "orderValue", "order_value", default=0.0)
    received_value: float = _wire("receivedValue", "received_value", default=0.0)

    # Numeric inputs as received, keyed by field name; used for export
    source_numbers: Dict[str, str] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _capture_source_numbers(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "source_numbers" in data:
            return data

        captured = {}
        for name in NUMERIC_FIELDS:
            for key in cls.model_fields[name].validation_alias.choices:
                if isinstance(key, str) and key in data:
                    text = numeric_source_text(data[key])
                    if text is not None:
                        captured[name] = text
                    break
        return {**data, "source_numbers": captured}

    @field_validator(
        "purchase_order_number",
        "item_code",
        "item_name",
        "supplier_name",
        "contract",
        "purchase_order_date",
        "received_date",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator(
        "quantity_ordered",
        "quantity_received",
        "order_value",
        "received_value",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return coerce_numeric(value)

    @classmethod
    def field_keys(cls) -> FrozenSet[str]:
        """Every input key that feeds a declared field, by name or wire alias."""
        keys = set(cls.model_fields)
        for field in cls.model_fields.values():
            if isinstance(field.validation_alias, AliasChoices):
                keys.update(key for key in field.validation_alias.choices if isinstance(key, str))
        return frozenset(keys)

    def field_values(self) -> Dict[str, Any]:
        """
        Declared field values keyed by field name, plus unknown payload keys.

        Alias keys that lost the lookup to another alias are dropped, so
        re-validating the result gives back the same field values.
        """
        keys = self.field_keys()
        extras = {key: value for key, value in (self.model_extra or {}).items() if key not in keys}
        return {**extras, **{name: getattr(self, name) for name in type(self).model_fields}}


class EnrichedRecord(PurchaseOrderRecord):
    """
    A record plus its derived SLA metrics.

    Instances are immutable: filtering and sorting build new sequences
    of the same records instead of editing them.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    fulfillment_ratio: float = 0.0  # received value / order value, percent
    elapsed_days: int = 0
    purchase_order_date_value: Optional[datetime] = None
    received_date_value: Optional[datetime] = None
