import jwt
import pytest

from util import encode_jwt, decode_jwt


class TestUtil:
    def test_encode_jwt(self):
        token = encode_jwt(1, 'alice', 'USER')

        payload = decode_jwt(token)
        assert payload['id'] == 1
        assert payload['username'] == 'alice'
        assert payload['role'] == 'USER'
        assert 'exp' in payload

    def test_decode_jwt_should_raise_for_expired_token(self):
        token = encode_jwt(1, 'alice', 'USER', expires_in=-10)

        with pytest.raises(jwt.ExpiredSignatureError):
            decode_jwt(token)

    def test_decode_jwt_should_raise_for_token_signed_with_other_secret(self):
        token = jwt.encode({'id': 1, 'username': 'alice', 'role': 'ADMIN'}, 'other-secret', algorithm='HS256')

        with pytest.raises(jwt.InvalidSignatureError):
            decode_jwt(token)
