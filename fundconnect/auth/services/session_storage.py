"""
Session Storage

Where the signed-in session payload lives. SessionService only talks to
this interface (get / set / remove), so the medium can be swapped:

  FlaskSessionStorage    → Flask's signed session cookie (the app default)
  InMemorySessionStorage → plain dict, for tests and scripts
"""

# Python Packages
from typing import Any, Dict, Optional

# Flask
from flask import session as flask_session





class SessionStorage:
    """ Storage interface... """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError



class FlaskSessionStorage(SessionStorage):
    """ Backed by flask.session (signed cookie, needs SECRET_KEY)... """

    def get(self, key: str) -> Optional[Any]:
        return flask_session.get(key)

    def set(self, key: str, value: Any) -> None:
        flask_session[key] = value
        flask_session.modified = True

    def remove(self, key: str) -> None:
        flask_session.pop(key, None)



class InMemorySessionStorage(SessionStorage):

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
