"""
hybrids.py - recognized designer breed registry
Static two-breed crosses that earn a name and a hybrid vigor bonus
"""

from typing import List, Optional, Tuple

from .models import HybridBreed


HYBRID_REGISTRY: Tuple[HybridBreed, ...] = (
    # very high popularity
    HybridBreed(
        id='labradoodle',
        name='Labradoodle',
        parent1_name='Labrador Retriever',
        parent2_name='Poodle',
        parent1_id=101,
        parent2_id=104,
        description='Friendly, intelligent, often hypoallergenic.',
        hybrid_vigor_bonus=8,
        popularity='very-high',
        price_multiplier=1.5,
        characteristics=('Family-friendly', 'Intelligent', 'Low-shedding', 'Active'),
    ),
    HybridBreed(
        id='goldendoodle',
        name='Goldendoodle',
        parent1_name='Golden Retriever',
        parent2_name='Poodle',
        parent1_id=103,
        parent2_id=104,
        description='Gentle, loyal, hypoallergenic family companion.',
        hybrid_vigor_bonus=8,
        popularity='very-high',
        price_multiplier=1.5,
        characteristics=('Gentle', 'Friendly', 'Low-shedding', 'Trainable'),
    ),
    HybridBreed(
        id='cockapoo',
        name='Cockapoo',
        parent1_name='Cocker Spaniel',
        parent2_name='Poodle',
        parent1_id=106,
        parent2_id=104,
        description='Affectionate, intelligent, low-shedding apartment dog.',
        hybrid_vigor_bonus=7,
        popularity='very-high',
        price_multiplier=1.4,
        characteristics=('Affectionate', 'Compact', 'Low-shedding', 'Playful'),
    ),

    # high popularity
    HybridBreed(
        id='goldenshepherd',
        name='Golden Shepherd',
        parent1_name='Golden Retriever',
        parent2_name='German Shepherd',
        parent1_id=103,
        parent2_id=201,
        description='Loyal, protective and intelligent.',
        hybrid_vigor_bonus=10,
        popularity='high',
        price_multiplier=1.4,
        characteristics=('Loyal', 'Protective', 'Intelligent', 'Versatile'),
    ),
    HybridBreed(
        id='sheepadoodle',
        name='Sheepadoodle',
        parent1_name='Old English Sheepdog',
        parent2_name='Poodle',
        description='Gentle giant, hypoallergenic, family-friendly.',
        hybrid_vigor_bonus=7,
        popularity='high',
        price_multiplier=1.4,
        characteristics=('Gentle', 'Large', 'Low-shedding', 'Calm'),
    ),
    HybridBreed(
        id='aussiedoodle',
        name='Aussiedoodle',
        parent1_name='Australian Shepherd',
        parent2_name='Poodle',
        parent1_id=204,
        parent2_id=104,
        description='Energetic, smart, hypoallergenic herding dog.',
        hybrid_vigor_bonus=8,
        popularity='high',
        price_multiplier=1.4,
        characteristics=('Energetic', 'Smart', 'Low-shedding', 'Athletic'),
    ),
    HybridBreed(
        id='bernedoodle',
        name='Bernedoodle',
        parent1_name='Bernese Mountain Dog',
        parent2_name='Poodle',
        description='Gentle, goofy, hypoallergenic.',
        hybrid_vigor_bonus=7,
        popularity='high',
        price_multiplier=1.5,
        characteristics=('Gentle', 'Playful', 'Low-shedding', 'Large'),
    ),
    HybridBreed(
        id='puggle',
        name='Puggle',
        parent1_name='Pug',
        parent2_name='Beagle',
        parent2_id=102,
        description='Friendly, energetic, fewer breathing issues than pugs.',
        hybrid_vigor_bonus=6,
        popularity='high',
        price_multiplier=1.2,
        characteristics=('Friendly', 'Compact', 'Energetic', 'Social'),
    ),
    HybridBreed(
        id='golden-lab',
        name='Golden Labrador',
        parent1_name='Golden Retriever',
        parent2_name='Labrador Retriever',
        parent1_id=103,
        parent2_id=101,
        description='Ultimate family retriever.',
        hybrid_vigor_bonus=7,
        popularity='high',
        price_multiplier=1.2,
        characteristics=('Friendly', 'Gentle', 'Trainable', 'Family-oriented'),
    ),

    # medium popularity
    HybridBreed(
        id='cavapoo',
        name='Cavapoo',
        parent1_name='Cavalier King Charles Spaniel',
        parent2_name='Poodle',
        description='Sweet, gentle, hypoallergenic lap dog.',
        hybrid_vigor_bonus=6,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Sweet', 'Small', 'Low-shedding', 'Affectionate'),
    ),
    HybridBreed(
        id='yorkipoo',
        name='Yorkipoo',
        parent1_name='Yorkshire Terrier',
        parent2_name='Poodle',
        description='Tiny and hypoallergenic with a big personality.',
        hybrid_vigor_bonus=6,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Tiny', 'Confident', 'Low-shedding', 'Portable'),
    ),
    HybridBreed(
        id='pomsky',
        name='Pomsky',
        parent1_name='Pomeranian',
        parent2_name='Siberian Husky',
        parent2_id=203,
        description='Mini husky look; parents are size incompatible.',
        hybrid_vigor_bonus=5,
        popularity='medium',
        price_multiplier=1.6,
        characteristics=('Small', 'Fluffy', 'Energetic', 'Cute'),
    ),
    HybridBreed(
        id='schnoodle',
        name='Schnoodle',
        parent1_name='Miniature Schnauzer',
        parent2_name='Poodle',
        description='Alert, hypoallergenic watchdog.',
        hybrid_vigor_bonus=6,
        popularity='medium',
        price_multiplier=1.2,
        characteristics=('Alert', 'Low-shedding', 'Loyal', 'Smart'),
    ),
    HybridBreed(
        id='boxerdoodle',
        name='Boxerdoodle',
        parent1_name='Boxer',
        parent2_name='Poodle',
        parent1_id=205,
        parent2_id=104,
        description='Playful, hypoallergenic family dog.',
        hybrid_vigor_bonus=7,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Playful', 'Athletic', 'Low-shedding', 'Friendly'),
    ),
    HybridBreed(
        id='shepsky',
        name='Shepsky',
        parent1_name='German Shepherd',
        parent2_name='Siberian Husky',
        parent1_id=201,
        parent2_id=203,
        description='Athletic, intelligent working dog mix.',
        hybrid_vigor_bonus=9,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Athletic', 'Smart', 'Loyal', 'Striking'),
    ),

    # working / sport mixes
    HybridBreed(
        id='labrabull',
        name='Labrabull',
        parent1_name='Labrador Retriever',
        parent2_name='Pit Bull',
        parent1_id=101,
        description='Strong, loyal, family-oriented.',
        hybrid_vigor_bonus=8,
        popularity='medium',
        price_multiplier=1.1,
        characteristics=('Strong', 'Loyal', 'Energetic', 'Friendly'),
    ),
    HybridBreed(
        id='german-shepherd-lab',
        name='Sheprador',
        parent1_name='German Shepherd',
        parent2_name='Labrador Retriever',
        parent1_id=201,
        parent2_id=101,
        description='Versatile working dog, great for service work.',
        hybrid_vigor_bonus=9,
        popularity='medium',
        price_multiplier=1.2,
        characteristics=('Intelligent', 'Versatile', 'Loyal', 'Trainable'),
    ),
    HybridBreed(
        id='border-aussie',
        name='Border Aussie',
        parent1_name='Border Collie',
        parent2_name='Australian Shepherd',
        parent1_id=202,
        parent2_id=204,
        description='Herding powerhouse that needs lots of activity.',
        hybrid_vigor_bonus=10,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Brilliant', 'Energetic', 'Athletic', 'Intense'),
    ),
    HybridBreed(
        id='huskador',
        name='Huskador',
        parent1_name='Siberian Husky',
        parent2_name='Labrador Retriever',
        parent1_id=203,
        parent2_id=101,
        description='Friendly, energetic, striking appearance.',
        hybrid_vigor_bonus=7,
        popularity='medium',
        price_multiplier=1.2,
        characteristics=('Friendly', 'Energetic', 'Beautiful', 'Social'),
    ),
    HybridBreed(
        id='corgidor',
        name='Corgidor',
        parent1_name='Pembroke Welsh Corgi',
        parent2_name='Labrador Retriever',
        parent2_id=101,
        description='Short-legged Lab.',
        hybrid_vigor_bonus=6,
        popularity='medium',
        price_multiplier=1.3,
        characteristics=('Adorable', 'Short', 'Friendly', 'Unique'),
    ),

    # rare
    HybridBreed(
        id='rotterman',
        name='Rotterman',
        parent1_name='Rottweiler',
        parent2_name='Doberman Pinscher',
        parent1_id=206,
        parent2_id=302,
        description='Powerful, loyal guardian.',
        hybrid_vigor_bonus=8,
        popularity='low',
        price_multiplier=1.4,
        characteristics=('Powerful', 'Protective', 'Loyal', 'Confident'),
    ),
)


def _normalize(name: str) -> str:
    return name.strip().lower()


def find_hybrid(breed1_name: str, breed2_name: str) -> Optional[HybridBreed]:
    """Registry entry for two breed names, in either order"""
    p1 = _normalize(breed1_name)
    p2 = _normalize(breed2_name)

    for hybrid in HYBRID_REGISTRY:
        h1 = _normalize(hybrid.parent1_name)
        h2 = _normalize(hybrid.parent2_name)
        if (p1, p2) in ((h1, h2), (h2, h1)):
            return hybrid
    return None


def find_hybrid_by_id(breed1_id: int, breed2_id: int) -> Optional[HybridBreed]:
    """Registry entry for two breed ids; only entries carrying both ids match"""
    for hybrid in HYBRID_REGISTRY:
        if hybrid.parent1_id is None or hybrid.parent2_id is None:
            continue
        pair = (hybrid.parent1_id, hybrid.parent2_id)
        if (breed1_id, breed2_id) in (pair, pair[::-1]):
            return hybrid
    return None


def hybrids_for_parent(breed_name: str) -> List[HybridBreed]:
    """Every recognized cross that uses a breed"""
    name = _normalize(breed_name)
    return [
        hybrid for hybrid in HYBRID_REGISTRY
        if name in (_normalize(hybrid.parent1_name), _normalize(hybrid.parent2_name))
    ]


def get_hybrid(hybrid_id: str) -> Optional[HybridBreed]:
    return next((h for h in HYBRID_REGISTRY if h.id == hybrid_id), None)
