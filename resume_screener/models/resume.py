from pydantic import BaseModel
from typing import List


class ExtractedResume(BaseModel):
    """Campi strutturati prodotti dal parser dei CV (componente esterno)."""
    name: str = ""
    email: str = ""
    phone: str = ""
    skills: List[str] = []
    experience: str = ""                # es. "5 years in software development"
    education: str = ""
    file_name: str = ""
    extraction_ok: bool = True          # False se il parser non è riuscito a estrarre i campi
