"""Grocery schema: users, saved recipes and grocery items

Revision ID: 3b7e2a91c4d0
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2a91c4d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'saved_recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=True),
        sa.Column('source_url', sa.String(length=500), nullable=True),
        sa.Column('servings', sa.Integer(), nullable=True),
        sa.Column('is_ai_generated', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('saved_recipe', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_saved_recipe_user_id'), ['user_id'], unique=False)

    op.create_table(
        'grocery_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=50), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('checked', sa.Boolean(), nullable=False),
        sa.Column('recipe_id', sa.String(length=64), nullable=True),
        sa.Column('recipe_title', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('grocery_item', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_grocery_item_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_grocery_item_category'), ['category'], unique=False)
        # One unchecked row per (user, name); checked rows may repeat
        batch_op.create_index(
            'uq_grocery_item_unchecked_name', ['user_id', 'name'],
            unique=True,
            sqlite_where=sa.text('checked = 0'),
            postgresql_where=sa.text('NOT checked'),
        )


def downgrade():
    with op.batch_alter_table('grocery_item', schema=None) as batch_op:
        batch_op.drop_index('uq_grocery_item_unchecked_name')
        batch_op.drop_index(batch_op.f('ix_grocery_item_category'))
        batch_op.drop_index(batch_op.f('ix_grocery_item_user_id'))
    op.drop_table('grocery_item')

    with op.batch_alter_table('saved_recipe', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_saved_recipe_user_id'))
    op.drop_table('saved_recipe')
    op.drop_table('user')
