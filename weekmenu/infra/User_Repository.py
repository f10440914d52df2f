from pathlib import Path
from typing import Optional, Union

from weekmenu.domain.User import User
from weekmenu.infra.Document_Store import DocumentStore, new_id, now_iso
from weekmenu.infra.paths import USERS_FILE


class UserRepository:
    def __init__(self, path: Union[str, Path] = USERS_FILE):
        self.store = DocumentStore(path)

    def find_by_id(self, user_id: str) -> Optional[User]:
        doc = self.store.get(user_id)
        return User.from_dict(doc) if doc else None

    def find_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        for doc in self.store.all():
            if (doc.get('username') or '').lower() == wanted:
                return User.from_dict(doc)
        return None

    def insert(self, user: User) -> User:
        user.id = user.id or new_id()
        user.created_at = now_iso()
        self.store.put(user.to_dict())
        return user

    def save(self, user: User) -> User:
        self.store.put(user.to_dict())
        return user
