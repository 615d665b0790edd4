"""initial holdings and ticket tables

Revision ID: 3f9c1d2e7a10
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c1d2e7a10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "erc404_fungible_balances",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("address", sa.String(length=42), nullable=False),
        sa.Column("balance", sa.String(length=78), nullable=False, server_default="0"),
    )
    op.create_index(
        "ix_erc404_fungible_balances_address", "erc404_fungible_balances", ["address"], unique=True
    )

    op.create_table(
        "erc404_nft_holdings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("token_id", sa.String(length=78), nullable=False),
        sa.Column("owner", sa.String(length=42), nullable=False),
    )
    op.create_index("ix_erc404_nft_holdings_token_id", "erc404_nft_holdings", ["token_id"], unique=True)
    op.create_index("ix_erc404_nft_holdings_owner", "erc404_nft_holdings", ["owner"])

    op.create_table(
        "erc721_holdings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("token_id", sa.String(length=78), nullable=False),
        sa.Column("owner", sa.String(length=42), nullable=False),
    )
    op.create_index("ix_erc721_holdings_token_id", "erc721_holdings", ["token_id"], unique=True)
    op.create_index("ix_erc721_holdings_owner", "erc721_holdings", ["owner"])

    op.create_table(
        "processed_transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("transaction_hash", sa.String(length=66), nullable=False),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_processed_transactions_transaction_hash", "processed_transactions", ["transaction_hash"], unique=True
    )

    op.create_table(
        "openings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("token_id", sa.String(length=78), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("transaction_hash", sa.String(length=66), nullable=False),
        sa.Column("token_type", sa.String(length=10), nullable=False),
        sa.Column("opener", sa.String(length=42), nullable=False),
    )
    op.create_index("ix_openings_token_id", "openings", ["token_id"])

    op.create_table(
        "minting_details",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("token_id", sa.String(length=78), nullable=False),
        sa.Column("roll_result", sa.String(length=78)),
        sa.Column("payout", sa.String(length=78)),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("transaction_hash", sa.String(length=66), nullable=False),
    )
    op.create_index("ix_minting_details_token_id", "minting_details", ["token_id"], unique=True)

    op.create_table(
        "minting_levels",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("minting_details_id", sa.Integer(), sa.ForeignKey("minting_details.id"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("win_amount", sa.String(length=78), nullable=False),
        sa.Column("roll_number", sa.String(length=78), nullable=False),
    )
    op.create_index("ix_minting_levels_minting_details_id", "minting_levels", ["minting_details_id"])


def downgrade() -> None:
    op.drop_index("ix_minting_levels_minting_details_id", table_name="minting_levels")
    op.drop_table("minting_levels")

    op.drop_index("ix_minting_details_token_id", table_name="minting_details")
    op.drop_table("minting_details")

    op.drop_index("ix_openings_token_id", table_name="openings")
    op.drop_table("openings")

    op.drop_index("ix_processed_transactions_transaction_hash", table_name="processed_transactions")
    op.drop_table("processed_transactions")

    op.drop_index("ix_erc721_holdings_owner", table_name="erc721_holdings")
    op.drop_index("ix_erc721_holdings_token_id", table_name="erc721_holdings")
    op.drop_table("erc721_holdings")

    op.drop_index("ix_erc404_nft_holdings_owner", table_name="erc404_nft_holdings")
    op.drop_index("ix_erc404_nft_holdings_token_id", table_name="erc404_nft_holdings")
    op.drop_table("erc404_nft_holdings")

    op.drop_index("ix_erc404_fungible_balances_address", table_name="erc404_fungible_balances")
    op.drop_table("erc404_fungible_balances")
