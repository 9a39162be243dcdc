from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.word_lists import get_word_matcher
from app.db.session import get_db
from app.services.word_matcher import WordMatcher


DBSessionDep = Annotated[AsyncSession, Depends(get_db)]
WordMatcherDep = Annotated[WordMatcher, Depends(get_word_matcher)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
