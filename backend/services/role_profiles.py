"""Role-based structural-weight profiles.

Each profile assigns a weight to every structural check; weights sum to
100 and a check contributes its full weight or nothing. Roles can also
carry must-have / good-to-have skill targets scored by the matcher.
"""

from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_ROLE_ID = "default"

CHECK_NAMES: tuple[str, ...] = (
    "contact_info",
    "education",
    "experience_or_projects",
    "quantified_achievement",
    "length",
    "publications",
)


class RoleProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    weights: dict[str, int]
    min_words: int = 200
    max_words: int = 1500
    must_have_skills: list[str] = []
    good_to_have_skills: list[str] = []

    @model_validator(mode="after")
    def _check_weights(self) -> "RoleProfile":
        unknown = set(self.weights) - set(CHECK_NAMES)
        if unknown:
            raise ValueError(f"Unknown structural checks: {sorted(unknown)}")
        missing = set(CHECK_NAMES) - set(self.weights)
        if missing:
            raise ValueError(f"Missing structural checks: {sorted(missing)}")
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("Structural weights must be non-negative")
        total = sum(self.weights.values())
        if total != 100:
            raise ValueError(f"Structural weights for {self.id!r} sum to {total}, expected 100")
        if self.min_words > self.max_words:
            raise ValueError("min_words must not exceed max_words")
        return self

    @property
    def has_skill_targets(self) -> bool:
        return bool(self.must_have_skills or self.good_to_have_skills)


def _weights(
    contact: int, education: int, experience: int,
    achievement: int, length: int, publications: int = 0,
) -> dict[str, int]:
    return dict(zip(CHECK_NAMES, (contact, education, experience, achievement, length, publications)))


ROLE_PROFILES: dict[str, RoleProfile] = {
    profile.id: profile
    for profile in (
        RoleProfile(
            id=DEFAULT_ROLE_ID,
            name="General",
            description="Default structural scoring",
            weights=_weights(20, 20, 25, 20, 15),
        ),
        RoleProfile(
            id="software-engineer",
            name="Software Engineer / Developer",
            description="Full-stack or backend development roles",
            weights=_weights(15, 15, 35, 20, 15),
            must_have_skills=["data structures", "algorithms", "git"],
            good_to_have_skills=[
                "python", "java", "javascript", "typescript", "c++", "react",
                "node.js", "spring boot", "django", "flask", "sql",
                "postgresql", "mongodb", "redis", "docker", "kubernetes",
                "aws", "ci/cd",
            ],
        ),
        RoleProfile(
            id="frontend-developer",
            name="Frontend Developer",
            description="UI/UX focused development roles",
            weights=_weights(15, 15, 35, 20, 15),
            must_have_skills=["html", "css", "javascript", "react", "responsive design"],
            good_to_have_skills=[
                "typescript", "vue", "angular", "next.js", "tailwind css",
                "redux", "webpack", "figma", "ui/ux",
            ],
        ),
        RoleProfile(
            id="backend-developer",
            name="Backend Developer",
            description="Server-side development and API roles",
            weights=_weights(15, 15, 35, 20, 15),
            must_have_skills=["sql", "rest api", "git"],
            good_to_have_skills=[
                "node.js", "python", "java", "golang", "express.js", "django",
                "flask", "fastapi", "spring boot", "postgresql", "mongodb",
                "redis", "mysql", "graphql", "microservices", "docker",
                "kubernetes", "aws", "nginx",
            ],
        ),
        RoleProfile(
            id="data-scientist",
            name="Data Scientist / ML Engineer",
            description="Machine learning, AI and data analysis roles",
            weights=_weights(15, 20, 25, 25, 10, 5),
            must_have_skills=["python", "machine learning", "statistics", "pandas", "numpy"],
            good_to_have_skills=[
                "pytorch", "tensorflow", "scikit-learn", "keras", "sql",
                "spark", "tableau", "power bi", "jupyter", "matplotlib",
                "seaborn", "deep learning", "natural language processing",
                "computer vision",
            ],
        ),
        RoleProfile(
            id="ai-ml-engineer",
            name="AI/ML Engineer",
            description="Advanced ML, LLM and generative AI roles",
            weights=_weights(10, 15, 25, 20, 10, 20),
            min_words=250,
            max_words=2000,
            must_have_skills=["python", "machine learning", "deep learning", "neural networks"],
            good_to_have_skills=[
                "llm", "hugging face", "pytorch", "tensorflow", "langchain",
                "rag", "prompt engineering", "fine-tuning", "generative ai",
            ],
        ),
        RoleProfile(
            id="research",
            name="Research / Academic",
            description="Research assistant, PhD and lab roles",
            weights=_weights(10, 20, 15, 10, 10, 35),
            min_words=250,
            max_words=3000,
        ),
        RoleProfile(
            id="devops-sre",
            name="DevOps / SRE Engineer",
            description="Infrastructure, deployment and reliability roles",
            weights=_weights(15, 15, 35, 20, 15),
            must_have_skills=["linux", "docker", "kubernetes", "ci/cd", "bash"],
            good_to_have_skills=[
                "aws", "azure", "gcp", "terraform", "ansible", "jenkins",
                "github actions", "prometheus", "grafana", "helm", "python",
            ],
        ),
        RoleProfile(
            id="data-engineer",
            name="Data Engineer",
            description="Data pipelines, ETL and big data roles",
            weights=_weights(15, 15, 35, 20, 15),
            must_have_skills=["sql", "python", "etl", "data pipelines"],
            good_to_have_skills=[
                "spark", "hadoop", "airflow", "kafka", "scala", "aws",
                "azure", "gcp", "snowflake", "databricks", "postgresql",
                "mongodb",
            ],
        ),
        RoleProfile(
            id="product-manager",
            name="Product Manager / APM",
            description="Product management and strategy roles",
            weights=_weights(20, 15, 30, 25, 10),
            must_have_skills=["product management", "user research", "communication"],
            good_to_have_skills=[
                "agile", "scrum", "jira", "figma", "sql", "data analysis",
                "a/b testing", "leadership",
            ],
        ),
        RoleProfile(
            id="cybersecurity",
            name="Cybersecurity Engineer",
            description="Security, penetration testing and compliance roles",
            weights=_weights(15, 15, 35, 15, 15, 5),
            must_have_skills=["cybersecurity", "networking", "linux", "cryptography"],
            good_to_have_skills=[
                "penetration testing", "wireshark", "metasploit",
                "burp suite", "splunk", "python", "bash",
            ],
        ),
    )
}


def get_role_profile(role_id: str | None) -> RoleProfile | None:
    """Look up a profile by id (case-insensitive). None when unknown."""
    if role_id is None:
        return None
    return ROLE_PROFILES.get(role_id.strip().lower())


def get_default_profile() -> RoleProfile:
    return ROLE_PROFILES[DEFAULT_ROLE_ID]


def get_all_roles() -> list[RoleProfile]:
    return list(ROLE_PROFILES.values())
