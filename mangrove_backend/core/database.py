# mangrove_backend/core/database.py
from .. import db

class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    # bcrypt hash, never the plaintext
    password = db.Column(db.String(120), nullable=False)

class ConfigItem(db.Model):
    __tablename__ = 'configs'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(120), unique=True, nullable=False)
    value = db.Column(db.Text)
    input = db.Column(db.String(20), default='text')  # "text" | "textarea"

class Mangrove(db.Model):
    __tablename__ = 'mangroves'

    id = db.Column(db.Integer, primary_key=True)
    # Index of the class in the model's output vector
    data_id = db.Column(db.Integer, unique=True, nullable=False)
    name = db.Column(db.String(255))
    image = db.Column(db.String(255))
    description = db.Column(db.Text)

    def to_dict(self):
        return {
            "dataId": self.data_id,
            "name": self.name,
            "image": self.image,
            "description": self.description,
        }
