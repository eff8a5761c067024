from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from installments_lite.infra.db.models.base import Base


class InstallmentsSettingsRow(Base):
    __tablename__ = "installments_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    shop_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Stored as PresentmentType values: none / simple / cheapest
    presentment_type_detail: Mapped[str] = mapped_column(
        String(20), nullable=False, default="cheapest"
    )
    presentment_type_cart: Mapped[str] = mapped_column(
        String(20), nullable=False, default="cheapest"
    )
    show_logo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    include_non_qualifying: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
