"""
Tortoise ORM models for the users service
"""
from tortoise.models import Model
from tortoise import fields
from uuid import uuid4


class User(Model):
    id = fields.UUIDField(primary_key=True, default=uuid4)
    login = fields.CharField(max_length=255)
    first_name = fields.CharField(max_length=255)
    last_name = fields.CharField(max_length=255)
    games_played = fields.IntField(default=0)
    current_game_id = fields.UUIDField(null=True)

    class Meta:
        table = "users"
