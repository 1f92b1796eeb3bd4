"""Seed club profile singleton

Revision ID: 7c2e4b8a1f05
Revises: 3f1a6c2d9b10
Create Date: 2026-10-17 09:20:03.771920

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c2e4b8a1f05'
down_revision: Union[str, None] = '3f1a6c2d9b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


from sqlalchemy import table, column, Integer, Text

def upgrade() -> None:
    club_profile = table('club_profile',
        column('id', Integer),
        column('history', Text),
        column('vision', Text)
    )

    # Exactly one profile row (id=1); updated in place by admins
    op.bulk_insert(club_profile, [
        {'id': 1, 'history': '', 'vision': ''}
    ])


def downgrade() -> None:
    op.execute("DELETE FROM missions WHERE profile_id = 1")
    op.execute("DELETE FROM organization_members WHERE profile_id = 1")
    op.execute("DELETE FROM club_profile WHERE id = 1")
