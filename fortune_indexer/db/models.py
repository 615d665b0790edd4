"""SQLAlchemy ORM models."""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from fortune_indexer.infrastructure.database.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Erc404FungibleBalance(Base):
    __tablename__ = "erc404_fungible_balances"

    id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column(String(42), unique=True, nullable=False, index=True)
    # uint256 amounts do not fit any SQL integer type, kept as decimal text
    balance = Column(String(78), nullable=False, default="0")


class Erc404NftHolding(Base):
    __tablename__ = "erc404_nft_holdings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token_id = Column(String(78), unique=True, nullable=False, index=True)
    owner = Column(String(42), nullable=False, index=True)


class Erc721Holding(Base):
    __tablename__ = "erc721_holdings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token_id = Column(String(78), unique=True, nullable=False, index=True)
    owner = Column(String(42), nullable=False, index=True)


class ProcessedTransaction(Base):
    __tablename__ = "processed_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_hash = Column(String(66), unique=True, nullable=False, index=True)
    processed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Opening(Base):
    __tablename__ = "openings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token_id = Column(String(78), nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    transaction_hash = Column(String(66), nullable=False)
    token_type = Column(String(10), nullable=False)  # ERC721, ERC404
    opener = Column(String(42), nullable=False)


class MintingDetails(Base):
    __tablename__ = "minting_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token_id = Column(String(78), unique=True, nullable=False, index=True)
    roll_result = Column(String(78))
    payout = Column(String(78))
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    transaction_hash = Column(String(66), nullable=False)

    levels = relationship(
        "MintingLevel",
        back_populates="minting_details",
        cascade="all, delete-orphan",
        order_by="MintingLevel.position",
        lazy="selectin",
    )


class MintingLevel(Base):
    __tablename__ = "minting_levels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    minting_details_id = Column(Integer, ForeignKey("minting_details.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    win_amount = Column(String(78), nullable=False)
    roll_number = Column(String(78), nullable=False)

    minting_details = relationship("MintingDetails", back_populates="levels")
