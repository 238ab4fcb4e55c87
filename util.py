import datetime

import jwt

from config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_SECONDS


def encode_jwt(id, username, role, expires_in=JWT_EXPIRE_SECONDS):
    payload = {
        'id': id,
        'username': username,
        'role': role,
        'exp': datetime.datetime.now(datetime.UTC) + datetime.timedelta(seconds=expires_in)
    }
    jwt_token = jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)
    return jwt_token


def decode_jwt(token):
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
