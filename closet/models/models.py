from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, ForeignKey, DateTime, Text, JSON
from sqlalchemy.sql import func
from datetime import datetime
from closet.core.db import Base


class ClothingItem(Base):
    __tablename__ = "clothing_item"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    name: Mapped[str] = mapped_column(String(200))
    category: Mapped[str] = mapped_column(String(32))
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    colors: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    seasons: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    occasions: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    wear_count: Mapped[int] = mapped_column(Integer, default=0)
    last_worn: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Outfit(Base):
    __tablename__ = "outfit"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    name: Mapped[str] = mapped_column(Text)
    occasion: Mapped[str | None] = mapped_column(String(32), nullable=True)
    weather: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    items: Mapped[list["OutfitItem"]] = relationship(
        "OutfitItem",
        back_populates="outfit",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OutfitItem.position",
    )


class OutfitItem(Base):
    __tablename__ = "outfit_item"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    outfit_id: Mapped[int] = mapped_column(Integer, ForeignKey("outfit.id", ondelete="CASCADE"))
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("clothing_item.id", ondelete="CASCADE"))
    slot: Mapped[str] = mapped_column(String(32))
    position: Mapped[int] = mapped_column(Integer, default=0)
    outfit: Mapped["Outfit"] = relationship("Outfit", back_populates="items")


class OutfitHistory(Base):
    __tablename__ = "outfit_history"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    outfit_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("outfit.id", ondelete="SET NULL"), nullable=True)
    occasion: Mapped[str | None] = mapped_column(String(32), nullable=True)
    weather: Mapped[str | None] = mapped_column(String(32), nullable=True)
    worn_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)
    items: Mapped[list["OutfitHistoryItem"]] = relationship(
        "OutfitHistoryItem",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OutfitHistoryItem.position",
    )


class OutfitHistoryItem(Base):
    __tablename__ = "outfit_history_item"
    history_id: Mapped[int] = mapped_column(Integer, ForeignKey("outfit_history.id", ondelete="CASCADE"), primary_key=True)
    item_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    position: Mapped[int] = mapped_column(Integer, default=0)
