"""Initial schema - permission, delegate, audit_event, ledger_control, collaborator tables.

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Collaborator tables, written by the account and record services.
    op.create_table(
        "registered_user",
        sa.Column("address", sa.String(66), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_table(
        "record",
        sa.Column("record_hash", sa.LargeBinary(32), primary_key=True),
        sa.Column("owner", sa.String(66), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_record_owner", "record", ["owner"])

    op.create_table(
        "permission",
        sa.Column("record_hash", sa.LargeBinary(32), primary_key=True),
        sa.Column("viewer", sa.String(66), primary_key=True),
        sa.Column("can_access", sa.Boolean(), nullable=False),
        sa.Column("key_reference", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(can_access AND key_reference <> '') OR (NOT can_access AND key_reference = '')",
            name="ck_permission_key_reference",
        ),
    )

    op.create_table(
        "delegate",
        sa.Column("owner", sa.String(66), primary_key=True),
        sa.Column("delegate", sa.String(66), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("owner <> delegate", name="ck_delegate_not_self"),
    )

    op.create_table(
        "audit_event",
        sa.Column("sequence", sa.BigInteger(), sa.Identity(always=True), primary_key=True),
        sa.Column("kind", sa.String(32), nullable=False),
        sa.Column("sender", sa.String(66), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("record_hash", sa.LargeBinary(32), nullable=True),
        sa.Column("owner", sa.String(66), nullable=True),
        sa.Column("viewer", sa.String(66), nullable=True),
        sa.Column("delegate", sa.String(66), nullable=True),
        sa.Column("key_reference", sa.Text(), nullable=True),
        sa.Column("evaluator", sa.Text(), nullable=True),
        sa.Column("result", sa.Boolean(), nullable=True),
    )
    op.create_index("ix_audit_event_record_hash", "audit_event", ["record_hash"])

    # Audit log is append-only.
    op.execute(
        """
        CREATE FUNCTION audit_event_immutable() RETURNS trigger AS $$
        BEGIN
            RAISE EXCEPTION 'audit_event is append-only';
        END;
        $$ LANGUAGE plpgsql
        """
    )
    op.execute(
        "CREATE TRIGGER audit_event_no_change BEFORE UPDATE OR DELETE ON audit_event "
        "FOR EACH ROW EXECUTE FUNCTION audit_event_immutable()"
    )

    op.create_table(
        "ledger_control",
        sa.Column("id", sa.SmallInteger(), primary_key=True),
        sa.Column("paused", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("id = 1", name="ck_ledger_control_single_row"),
    )
    op.execute("INSERT INTO ledger_control (id, paused) VALUES (1, false)")


def downgrade() -> None:
    op.drop_table("ledger_control")
    op.execute("DROP TRIGGER IF EXISTS audit_event_no_change ON audit_event")
    op.execute("DROP FUNCTION IF EXISTS audit_event_immutable()")
    op.drop_table("audit_event")
    op.drop_table("delegate")
    op.drop_table("permission")
    op.drop_table("record")
    op.drop_table("registered_user")
