"""Skill lexicon: canonical skills, synonyms, categories and lookup indexes.

The lexicon is immutable once built. `get_default_lexicon()` builds the
bundled table once per process; components take the lexicon as an
argument so tests can inject a small one.
"""

import logging
from functools import lru_cache
from typing import Iterable, Iterator

from rapidfuzz import fuzz, process

from models.schemas.skills import MatchType, SkillCategory, SkillEntry
from services.text_normalizer import clean, normalize, protected_words

logger = logging.getLogger(__name__)

# Fuzzy canonicalization threshold (0-100) and minimum term length.
# "nosql" must stay unresolved; "postgre sql" resolves to "postgresql".
FUZZY_THRESHOLD = 90
FUZZY_MIN_LENGTH = 4

L = SkillCategory.LANGUAGE
F = SkillCategory.FRAMEWORK
T = SkillCategory.TOOL
S = SkillCategory.SOFT_SKILL
D = SkillCategory.DOMAIN

# ---------------------------------------------------------------------------
# Bundled skill table: (canonical, category, synonyms)
# Ambiguous everyday words ("go", "r", "spring", "express", "node", "cv")
# never appear as bare surface forms.
# ---------------------------------------------------------------------------
DEFAULT_SKILLS: tuple[tuple[str, SkillCategory, tuple[str, ...]], ...] = (
    # Programming languages
    ("python", L, ("python3", "python 3")),
    ("java", L, ("core java", "java 8", "java 11", "java 17")),
    ("javascript", L, ("js", "es6", "ecmascript", "java script")),
    ("typescript", L, ("ts",)),
    ("c++", L, ("cpp", "c plus plus")),
    ("c#", L, ("csharp", "c sharp")),
    ("golang", L, ("go lang",)),
    ("rust", L, ()),
    ("kotlin", L, ()),
    ("swift", L, ()),
    ("scala", L, ()),
    ("ruby", L, ()),
    ("php", L, ()),
    ("perl", L, ()),
    ("dart", L, ()),
    ("matlab", L, ()),
    ("sql", L, ("structured query language",)),
    ("html", L, ("html5",)),
    ("css", L, ("css3",)),
    ("bash", L, ("shell scripting", "shell script", "bash scripting")),
    ("solidity", L, ()),
    # Frontend frameworks
    ("react", F, ("reactjs", "react.js")),
    ("react native", F, ("react-native",)),
    ("angular", F, ("angularjs", "angular.js")),
    ("vue", F, ("vue.js", "vuejs")),
    ("next.js", F, ("nextjs",)),
    ("svelte", F, ()),
    ("redux", F, ()),
    ("tailwind css", F, ("tailwind", "tailwindcss")),
    ("bootstrap", F, ()),
    ("flutter", F, ()),
    # Backend frameworks
    ("node.js", F, ("nodejs",)),
    ("express.js", F, ("expressjs",)),
    ("django", F, ("django rest framework",)),
    ("flask", F, ()),
    ("fastapi", F, ("fast api",)),
    ("spring boot", F, ("springboot", "spring framework")),
    ("ruby on rails", F, ("rails", "ror")),
    ("laravel", F, ()),
    (".net", F, ("dotnet", "dot net")),
    ("asp.net", F, ("asp.net core",)),
    # Data & ML libraries
    ("pandas", F, ()),
    ("numpy", F, ()),
    ("scikit-learn", F, ("sklearn", "scikit learn")),
    ("tensorflow", F, ("tensor flow",)),
    ("pytorch", F, ("torch",)),
    ("keras", F, ()),
    ("hugging face", F, ("huggingface", "hugging face transformers")),
    ("langchain", F, ("lang chain",)),
    ("matplotlib", F, ()),
    ("seaborn", F, ()),
    ("opencv", F, ("open cv",)),
    # Cloud, DevOps & tooling
    ("git", T, ()),
    ("github", T, ()),
    ("gitlab", T, ()),
    ("bitbucket", T, ()),
    ("github actions", T, ()),
    ("docker", T, ("docker compose",)),
    ("kubernetes", T, ("k8s", "kube")),
    ("helm", T, ()),
    ("terraform", T, ()),
    ("ansible", T, ()),
    ("jenkins", T, ()),
    ("aws", T, ("amazon web services", "amazon aws")),
    ("azure", T, ("microsoft azure",)),
    ("gcp", T, ("google cloud", "google cloud platform")),
    ("firebase", T, ()),
    ("linux", T, ("unix", "ubuntu")),
    ("nginx", T, ()),
    ("prometheus", T, ()),
    ("grafana", T, ()),
    ("postman", T, ()),
    ("jira", T, ()),
    ("figma", T, ()),
    ("jupyter", T, ("jupyter notebook", "jupyter notebooks")),
    ("selenium", T, ()),
    ("pytest", T, ()),
    ("jest", T, ()),
    ("webpack", T, ()),
    ("graphql", T, ("graph ql",)),
    ("rest api", T, ("rest apis", "restful", "restful api", "restful apis")),
    # Databases & data platforms
    ("mysql", T, ("my sql",)),
    ("postgresql", T, ("postgres", "postgre sql")),
    ("mongodb", T, ("mongo", "mongo db")),
    ("redis", T, ()),
    ("sqlite", T, ()),
    ("dynamodb", T, ("dynamo db",)),
    ("elasticsearch", T, ("elastic search",)),
    ("kafka", T, ("apache kafka",)),
    ("rabbitmq", T, ("rabbit mq",)),
    ("spark", T, ("apache spark", "pyspark")),
    ("hadoop", T, ("apache hadoop",)),
    ("airflow", T, ("apache airflow",)),
    ("snowflake", T, ()),
    ("databricks", T, ()),
    ("tableau", T, ()),
    ("power bi", T, ("powerbi",)),
    # Security tooling
    ("wireshark", T, ()),
    ("metasploit", T, ()),
    ("burp suite", T, ("burpsuite",)),
    ("splunk", T, ()),
    # Domains & practices
    ("machine learning", D, ("ml",)),
    ("deep learning", D, ()),
    ("artificial intelligence", D, ("ai",)),
    ("ai/ml", D, ("ai ml",)),
    ("natural language processing", D, ("nlp",)),
    ("computer vision", D, ()),
    ("neural networks", D, ("neural network",)),
    ("generative ai", D, ("genai", "gen ai")),
    ("llm", D, ("llms", "large language model", "large language models")),
    ("rag", D, ("retrieval augmented generation", "retrieval-augmented generation")),
    ("prompt engineering", D, ()),
    ("fine-tuning", D, ("fine tuning", "finetuning")),
    ("data structures", D, ("dsa",)),
    ("algorithms", D, ()),
    ("object oriented programming", D, ("oop", "oops", "object-oriented programming")),
    ("system design", D, ()),
    ("data analysis", D, ("data analytics",)),
    ("statistics", D, ()),
    ("etl", D, ()),
    ("data pipelines", D, ("data pipeline",)),
    ("microservices", D, ("microservice", "micro services")),
    ("ci/cd", D, ("cicd", "ci cd", "continuous integration")),
    ("devops", D, ("dev ops",)),
    ("cloud computing", D, ()),
    ("version control", D, ()),
    ("responsive design", D, ("responsive web design",)),
    ("ui/ux", D, ("ui ux", "ux design", "ui design")),
    ("agile", D, ("agile methodology",)),
    ("scrum", D, ()),
    ("a/b testing", D, ("ab testing",)),
    ("product management", D, ()),
    ("user research", D, ()),
    ("cybersecurity", D, ("cyber security", "information security")),
    ("penetration testing", D, ("pentesting", "pen testing")),
    ("networking", D, ("computer networks", "computer networking")),
    ("cryptography", D, ()),
    ("operating systems", D, ()),
    ("dbms", D, ("database management systems",)),
    # Soft skills
    ("communication", S, ("communication skills",)),
    ("leadership", S, ()),
    ("teamwork", S, ("team work", "team player")),
    ("problem solving", S, ("problem-solving",)),
    ("critical thinking", S, ()),
    ("time management", S, ()),
    ("analytical skills", S, ("analytical thinking",)),
    ("collaboration", S, ()),
)

# Bare words kept out of prose extraction but unambiguous as a whole
# requirement or profile entry ("Node", "Go")
LIST_TERM_ALIASES: dict[str, str] = {
    "node": "node.js",
    "express": "express.js",
    "go": "golang",
    "spring": "spring boot",
}


class SkillLexicon:
    """Immutable skill table with phrase and surface-form indexes.

    Raises ValueError when two entries share a canonical name, when a
    surface form (after normalization) maps to more than one skill, or when
    a list-term alias is invalid.
    """

    def __init__(
        self,
        entries: Iterable[SkillEntry],
        list_aliases: dict[str, str] | None = None,
    ) -> None:
        self._entries: dict[str, SkillEntry] = {}
        forms: list[str] = []
        for entry in entries:
            canonical = clean(entry.canonical)
            if canonical != entry.canonical:
                entry = entry.model_copy(update={"canonical": canonical})
            if canonical in self._entries:
                raise ValueError(f"Duplicate canonical skill: {canonical!r}")
            self._entries[canonical] = entry
            forms.extend(entry.surface_forms)

        protected: set[str] = set()
        for form in forms:
            protected |= protected_words(form)
        self._protected = tuple(sorted(protected))

        # token tuple -> (canonical, match type)
        self._phrases: dict[tuple[str, ...], tuple[str, MatchType]] = {}
        for canonical, entry in self._entries.items():
            for form in entry.surface_forms:
                tokens = tuple(normalize(form, self._protected))
                if not tokens:
                    raise ValueError(f"Surface form {form!r} of {canonical!r} has no tokens")
                owner = self._phrases.get(tokens)
                if owner is not None:
                    if owner[0] == canonical:
                        continue
                    raise ValueError(
                        f"Surface form {form!r} is shared by {owner[0]!r} and {canonical!r}"
                    )
                match_type = MatchType.EXACT if form == entry.canonical else MatchType.SYNONYM
                self._phrases[tokens] = (canonical, match_type)

        # first token -> phrases starting with it, longest first
        self._by_first: dict[str, list[tuple[str, ...]]] = {}
        for tokens in self._phrases:
            self._by_first.setdefault(tokens[0], []).append(tokens)
        for candidates in self._by_first.values():
            candidates.sort(key=len, reverse=True)

        self._max_phrase_len = max((len(t) for t in self._phrases), default=0)
        self._surface_index = {" ".join(t): t for t in self._phrases}
        self._surface_choices = list(self._surface_index)

        self._list_aliases: dict[str, str] = {}
        for alias, canonical in (list_aliases or {}).items():
            key = " ".join(normalize(alias, self._protected))
            if canonical not in self._entries:
                raise ValueError(f"Alias {alias!r} points at unknown skill {canonical!r}")
            if key in self._surface_index:
                raise ValueError(f"Alias {alias!r} is already a surface form")
            self._list_aliases[key] = canonical

    # -- container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SkillEntry]:
        return iter(self._entries.values())

    def __contains__(self, canonical: object) -> bool:
        return isinstance(canonical, str) and canonical.lower() in self._entries

    def get(self, canonical: str) -> SkillEntry | None:
        return self._entries.get(canonical.lower())

    @property
    def canonical_names(self) -> list[str]:
        return list(self._entries)

    @property
    def protected_terms(self) -> tuple[str, ...]:
        return self._protected

    @property
    def max_phrase_len(self) -> int:
        return self._max_phrase_len

    # -- lookups ------------------------------------------------------------

    def tokenize(self, text: str) -> list[str]:
        """Normalize text with this lexicon's punctuated spellings protected."""
        return normalize(text, self._protected)

    def phrases_starting_with(self, token: str) -> list[tuple[str, ...]]:
        """Candidate phrases beginning with `token`, longest first."""
        return self._by_first.get(token, [])

    def resolve_phrase(self, tokens: tuple[str, ...]) -> tuple[str, MatchType] | None:
        """Exact lookup of a token tuple; returns (canonical, match type)."""
        return self._phrases.get(tokens)

    def lookup(self, term: str) -> SkillEntry | None:
        """Case- and whitespace-insensitive lookup of a canonical name or synonym."""
        hit = self._phrases.get(tuple(self.tokenize(term)))
        return self._entries[hit[0]] if hit else None

    def canonicalize(self, term: str) -> str | None:
        """Resolve a free-text skill to its canonical name.

        Tries an exact normalized lookup first, then the list-term aliases,
        then a fuzzy match against every surface form for terms long enough
        to fuzz safely.
        """
        tokens = tuple(self.tokenize(term))
        if not tokens:
            return None
        hit = self._phrases.get(tokens)
        if hit:
            return hit[0]

        joined = " ".join(tokens)
        if joined in self._list_aliases:
            return self._list_aliases[joined]
        if len(joined) < FUZZY_MIN_LENGTH:
            return None
        best = process.extractOne(
            joined,
            self._surface_choices,
            scorer=fuzz.ratio,
            score_cutoff=FUZZY_THRESHOLD,
        )
        if best is None:
            return None
        logger.debug("Fuzzy-matched skill %r to %r (%.1f)", term, best[0], best[1])
        return self._phrases[self._surface_index[best[0]]][0]


def build_lexicon(
    rows: Iterable[tuple[str, SkillCategory, tuple[str, ...]]],
    list_aliases: dict[str, str] | None = None,
) -> SkillLexicon:
    """Build a lexicon from (canonical, category, synonyms) rows."""
    return SkillLexicon(
        (
            SkillEntry(canonical=canonical, category=category, synonyms=synonyms)
            for canonical, category, synonyms in rows
        ),
        list_aliases,
    )


@lru_cache(maxsize=1)
def get_default_lexicon() -> SkillLexicon:
    """The bundled lexicon, built once per process."""
    lexicon = build_lexicon(DEFAULT_SKILLS, LIST_TERM_ALIASES)
    logger.info("Skill lexicon loaded: %d skills", len(lexicon))
    return lexicon


def ensure_lexicon(lexicon: SkillLexicon | None) -> SkillLexicon:
    """Fall back to the bundled lexicon when none is injected."""
    return get_default_lexicon() if lexicon is None else lexicon
