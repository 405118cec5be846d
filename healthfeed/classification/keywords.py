"""Keyword lists used to decide whether an article belongs in the health feed.

These are tuning data. Terms match on word boundaries and tolerate a
plural suffix, so list the singular form.
"""

MENTAL_HEALTH_TERMS = [
    "mental health",
    "mental illness",
    "psychology",
    "psychological",
    "psychiatric",
    "psychiatry",
    "psychiatrist",
    "depression",
    "anxiety",
    "cognitive",
    "dementia",
    "alzheimer",
    "brain",
    "neurological",
    "neurology",
    "mental stress",
    "insomnia",
    "suicide",
    "ptsd",
    "adhd",
    "autism",
    "addiction",
    "loneliness",
]

DISEASE_TERMS = [
    "disease",
    "illness",
    "cancer",
    "tumor",
    "oncology",
    "covid",
    "coronavirus",
    "virus",
    "infection",
    "bacterial",
    "viral",
    "outbreak",
    "chronic",
    "acute",
    "syndrome",
    "disorder",
    "injury",
    "diabetes",
    "hypertension",
    "asthma",
    "allergy",
    "cardiovascular",
    "cardiac",
    "stroke",
    "measles",
    "flu",
    "influenza",
    "hiv",
    "vaccine",
    "vaccination",
    "surgery",
    "treatment",
    "therapy",
    "medication",
]

RESEARCH_TERMS = [
    "medical research",
    "clinical trial",
    "medical study",
    "research",
    "researcher",
    "study",
    "scientific",
    "scientist",
    "clinical",
    "screening",
    "medical test",
    "x-ray",
    "mri",
    "ct scan",
    "genome",
    "fda",
]

WELLNESS_TERMS = [
    "nutrition",
    "nutritional",
    "diet",
    "dietary",
    "vitamin",
    "supplement",
    "fitness",
    "exercise",
    "weight loss",
    "weight management",
    "obesity",
    "lifestyle",
    "wellness",
    "wellbeing",
    "well-being",
    "physical therapy",
    "occupational therapy",
    "rehabilitation",
    "sleep",
    "longevity",
    "protein",
]

GENERAL_HEALTH_TERMS = [
    "health",
    "healthcare",
    "health care",
    "medical",
    "medicine",
    "doctor",
    "physician",
    "nurse",
    "patient",
    "hospital",
    "clinic",
    "diagnosis",
    "symptom",
    "cure",
    "drug",
    "pharmaceutical",
    "prescription",
    "immunization",
    "immune",
    "heart",
    "lung",
    "respiratory",
    "blood",
    "blood pressure",
    "kidney",
    "liver",
    "pain",
    "inflammation",
    "fever",
    "side effect",
    "recovery",
    "healing",
    "aging",
    "pregnancy",
    "maternal",
    "epidemic",
    "pandemic",
    "public health",
]


def _unique(*groups):
    seen = set()
    merged = []
    for group in groups:
        for term in group:
            if term not in seen:
                seen.add(term)
                merged.append(term)
    return merged


HEALTH_KEYWORDS = _unique(
    GENERAL_HEALTH_TERMS,
    MENTAL_HEALTH_TERMS,
    DISEASE_TERMS,
    RESEARCH_TERMS,
    WELLNESS_TERMS,
)

# Phrases that signal an article is about something else even when it
# mentions a health word in passing.
NON_HEALTH_INDICATORS = [
    # sports
    "sports score",
    "football game",
    "basketball game",
    "baseball game",
    "tennis match",
    "golf tournament",
    "cricket match",
    "rugby match",
    "hockey game",
    "super bowl",
    "world cup",
    # politics
    "election results",
    "political campaign",
    "presidential race",
    "parliamentary vote",
    "campaign trail",
    # finance
    "stock market",
    "investment advice",
    "banking news",
    "earnings report",
    "economic forecast",
    "interest rate",
    # technology
    "software update",
    "app release",
    "computer virus",
    "social media platform",
    "digital marketing",
    "smartphone launch",
    # entertainment
    "movie review",
    "film premiere",
    "box office",
    "music album",
    "celebrity gossip",
    "red carpet",
    # travel and lifestyle
    "travel guide",
    "hotel booking",
    "restaurant review",
    "cooking show",
    "recipe book",
    "fashion show",
    "clothing line",
    "makeup tutorial",
    # vehicles
    "car review",
    "vehicle launch",
    "airline booking",
    "flight schedule",
    # property
    "real estate listing",
    "property sale",
    "housing market",
    # education
    "university admission",
    "student loan",
    # crime and courts
    "criminal case",
    "police report",
    "court ruling",
    # environment
    "weather forecast",
    "wildlife conservation",
    "pet care",
]
