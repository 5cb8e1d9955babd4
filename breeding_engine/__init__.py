"""
Breeding Engine - kennel breeding and genetics engine

Inheritable traits, breed composition, pedigree analysis and puppy generation
for a kennel-management game
"""

from .models import (
    Sex,
    Gene,
    Genetics,
    BreedPortion,
    HybridBreed,
    BreedComposition,
    Dog,
    Kennel,
    PedigreeNode,
    PERFORMANCE_TRAITS,
    CATEGORICAL_TRAITS,
)

from .genetics import (
    GeneticsEngine,
    dominance_for,
)

from .size_compatibility import (
    SizeBand,
    Severity,
    SizeProfile,
    SizeCompatibility,
    classify_weight,
    check_size_compatibility,
    requires_artificial_insemination,
    expected_puppy_weight,
)

from .hybrids import (
    HYBRID_REGISTRY,
    find_hybrid,
    find_hybrid_by_id,
    hybrids_for_parent,
)

from .composition import (
    create_purebred_composition,
    calculate_offspring_composition,
    composition_for,
    composition_summary,
)

from .pedigree import (
    InbreedingAnalysis,
    PedigreeTree,
    build_ancestry_tree,
    analyze_inbreeding,
    calculate_coi,
    build_pedigree_tree,
)

from .generator import (
    BreedingConfig,
    PuppyGenerator,
)

from .preview import (
    BreedingPreview,
    BreedingPreviewGenerator,
)

from .pregnancy import (
    weeks_between,
    pregnancy_due_date,
    is_pregnancy_complete,
    weeks_remaining,
    record_breeding,
)

from .validator import (
    BreedingValidator,
    ValidationReport,
    validate_pairing,
)


__version__ = "1.0.0"
__all__ = [
    # Models
    "Sex",
    "Gene",
    "Genetics",
    "BreedPortion",
    "HybridBreed",
    "BreedComposition",
    "Dog",
    "Kennel",
    "PedigreeNode",
    "PERFORMANCE_TRAITS",
    "CATEGORICAL_TRAITS",

    # Genetics
    "GeneticsEngine",
    "dominance_for",

    # Size
    "SizeBand",
    "Severity",
    "SizeProfile",
    "SizeCompatibility",
    "classify_weight",
    "check_size_compatibility",
    "requires_artificial_insemination",
    "expected_puppy_weight",

    # Hybrids
    "HYBRID_REGISTRY",
    "find_hybrid",
    "find_hybrid_by_id",
    "hybrids_for_parent",

    # Composition
    "create_purebred_composition",
    "calculate_offspring_composition",
    "composition_for",
    "composition_summary",

    # Pedigree
    "InbreedingAnalysis",
    "PedigreeTree",
    "build_ancestry_tree",
    "analyze_inbreeding",
    "calculate_coi",
    "build_pedigree_tree",

    # Generator
    "BreedingConfig",
    "PuppyGenerator",

    # Preview
    "BreedingPreview",
    "BreedingPreviewGenerator",

    # Pregnancy
    "weeks_between",
    "pregnancy_due_date",
    "is_pregnancy_complete",
    "weeks_remaining",
    "record_breeding",

    # Validator
    "BreedingValidator",
    "ValidationReport",
    "validate_pairing",
]
