from pokedex.models import PokemonSpeciesData, TranslationStyle

CAVE_HABITAT = "cave"


def select_translation_style(species: PokemonSpeciesData) -> TranslationStyle:
    """Rule: habitat is 'cave' OR legendary -> Yoda. Otherwise -> Shakespeare."""
    # Checked in this order; only matters once a third style exists
    if species.habitat == CAVE_HABITAT:
        return TranslationStyle.YODA
    if species.is_legendary:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE
