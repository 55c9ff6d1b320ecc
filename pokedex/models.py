from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TranslationStyle(str, Enum):
    # The value doubles as the FunTranslations endpoint stem
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"


# --- Raw payloads from the external APIs (only the fields we read) ---

class NamedResource(BaseModel):
    name: str

class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource

class PokeAPISpecies(BaseModel):
    name: str
    is_legendary: bool
    habitat: NamedResource | None = None
    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)

class TranslationContents(BaseModel):
    translated: str

class FunTranslationsResponse(BaseModel):
    contents: TranslationContents


# Model for the normalized species data (Internal Contract)
class PokemonSpeciesData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str
    habitat: str | None = None
    is_legendary: bool

# Model for the final, basic API response (Public Endpoint 1)
class PokemonResponse(BaseModel):
    name: str
    description: str
    habitat: str | None
    is_legendary: bool

    @classmethod
    def from_species(cls, species: PokemonSpeciesData, **overrides) -> "PokemonResponse":
        return cls(**{**species.model_dump(), **overrides})

# Model for the final, translated API response (Public Endpoint 2)
# Same public shape as the basic response; the extra fields never reach the JSON body
class TranslatedPokemonResponse(PokemonResponse):
    translated: bool = Field(default=False, exclude=True)
    translation_style: TranslationStyle | None = Field(default=None, exclude=True)
