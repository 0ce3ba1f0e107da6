# Static resume content. Read-only at runtime.

from portfolio.resume.models import (
    Accomplishment,
    Education,
    Experience,
    Profile,
    Reference,
    Skill,
)


PROFILE = Profile(
    name="Ryan Moe",
    title="Principal Engineer",
    years_experience="9+ Years",
    email="ryanallenmoe@gmail.com",
    location="Highland, UT",
    languages=("English", "Japanese"),
    summary=(
        "Principal Engineer with over 9 years of experience building secure, scalable systems. "
        "Specializing in end-to-end application development, AI integration, post-quantum encryption, "
        "and test automation. Proven track record of delivering HIPAA-compliant solutions, "
        "architecting CI/CD pipelines, and achieving significant cost reductions through intelligent automation."
    ),
)

EDUCATION = Education(
    degree="Bachelor of Science",
    field="Computer Engineering",
    school="Brigham Young University",
    years="2016 - 2019",
)

EXPERIENCES: tuple[Experience, ...] = (
    Experience(
        id="visyfy",
        title="Principal Engineer",
        company="Visyfy",
        location="Remote",
        start_date="2024",
        end_date="Present",
        highlights=(
            "Built end-to-end, a HIPAA-compliant, quantum-resistant, encrypted social networking platform "
            "utilizing patented security architecture for long-term quantum resilience",
            "Developed and tested AI Paralegal agent that performed as a personal injury law paralegal. "
            "Capabilities included client communication, document management, scheduling, and medical coordination",
        ),
        skills=(
            "JavaScript", "React", "React Native", "iOS", "Mobile Dev", "Firebase", "Postgres", "NoSQL",
            "Post-quantum Encryption", "AI Integration", "Backend Systems", "Azure",
        ),
        description=(
            "Leading the development of a cutting-edge social networking platform with military-grade "
            "encryption and AI-powered legal assistance tools."
        ),
    ),
    Experience(
        id="vivint",
        title="Senior Automation Engineer",
        company="Vivint",
        location="Lehi, UT",
        start_date="2023",
        end_date="2026",
        highlights=(
            "Collaborated and architected the migration of CI/CD automation pipeline to a custom-built test "
            "scheduler, resulting in a 30% improvement in regression test performance",
            "Developed a firmware version handler solution for test setup, which allowed tests to bypass "
            "irrelevant OTA dependencies. Resulting 20% improvement in automation test success rates",
        ),
        skills=(
            "Python", "CI/CD", "Test Automation", "Docker", "Backend Systems", "Embedded Systems",
            "GCP", "AWS", "Firebase",
        ),
        description="Architecting and optimizing test automation infrastructure for smart home IoT systems.",
    ),
    Experience(
        id="optilogic",
        title="Senior SDET",
        company="Optilogic",
        location="American Fork, UT",
        start_date="2022",
        end_date="2023",
        highlights=(
            "Designed and implemented test automation with a notification system for a PaaS product, causing a "
            "shift from reactive, manual QA to proactive, autonomous QA, resulting 240% faster bug discovery",
            "Achieved a 99.6% reduction in monthly automation resource spending by re-architecting the "
            "automation system to utilize self-hosted runners",
        ),
        skills=(
            "JavaScript", "TypeScript", "Python", "PyTest", "Playwright", "Test Automation", "Azure", "Postgres",
        ),
        description="Transformed QA processes through intelligent automation and significant cost optimization.",
    ),
    Experience(
        id="prior",
        title="Software Engineer",
        company="Northrop Grumman | Raytheon | Smarter AI | Dyno Nobel",
        location="Various",
        start_date="2017",
        end_date="2022",
        highlights=(
            "Worked in embedded systems and full-stack development, hardening fundamental skills in programming "
            "languages, frameworks, cloud services, platform architectures, and version control",
        ),
        skills=("C/C++", "Python", "JavaScript", "Embedded Systems", "Backend Systems", "AWS", "Docker"),
        description="Built foundational engineering expertise across defense, AI, and industrial sectors.",
    ),
)

SKILLS: tuple[Skill, ...] = (
    Skill(id="javascript", name="JavaScript", category="language", proficiency=97),
    Skill(id="typescript", name="TypeScript", category="language", proficiency=95),
    Skill(id="python", name="Python", category="language", proficiency=89),
    Skill(id="cpp", name="C/C++", category="language", proficiency=75),
    Skill(id="react", name="React", category="framework", proficiency=93),
    Skill(id="react-native", name="React Native", category="framework", proficiency=88),
    Skill(id="azure", name="Azure", category="cloud", proficiency=82),
    Skill(id="gcp", name="GCP", category="cloud", proficiency=80),
    Skill(id="aws", name="AWS", category="cloud", proficiency=76),
    Skill(id="firebase", name="Firebase", category="cloud", proficiency=85),
    Skill(id="docker", name="Docker", category="specialty", proficiency=85),
    Skill(id="postgres", name="Postgres", category="database", proficiency=85),
    Skill(id="nosql", name="NoSQL", category="database", proficiency=82),
    Skill(id="encryption", name="Post-quantum Encryption", category="specialty", proficiency=88),
    Skill(id="test-automation", name="Test Automation", category="specialty", proficiency=92),
    Skill(id="ai-integration", name="AI Integration", category="specialty", proficiency=90),
    Skill(id="backend", name="Backend Systems", category="specialty", proficiency=91),
    Skill(id="mobile", name="Mobile Dev", category="specialty", proficiency=85),
    Skill(id="ios", name="iOS", category="specialty", proficiency=80),
    Skill(id="cicd", name="CI/CD", category="specialty", proficiency=88),
    Skill(id="pytest", name="PyTest", category="framework", proficiency=90),
    Skill(id="playwright", name="Playwright", category="framework", proficiency=88),
    Skill(id="embedded", name="Embedded Systems", category="specialty", proficiency=70),
)

# Contact details of referees are intentionally not published.
REFERENCES: tuple[Reference, ...] = (
    Reference(
        id="micah-kelly",
        name="Micah Kelly",
        role="Staff Software Engineer in Test",
        affiliation="Vivint",
        photo="/micah-profile.jpeg",
        text=(
            "Ryan is a thoughtful, intelligent, and highly communicative engineer. His code was consistently "
            "clean, well-structured, and clearly thought out. Ryan also excelled at automating difficult and "
            "complex tests. Because of these qualities, Ryan was one of my favorite engineers to work with. "
            "I would confidently and happily recommend him for any key technical role."
        ),
    ),
    Reference(
        id="hayden-randall",
        name="Hayden Randall",
        role="Software Developer in Test",
        affiliation="Vivint",
        photo="/hayden-profile.jpeg",
        text=(
            "Ryan was consistently one of the most reliable people on our team. If he didn't know the answer "
            "to something, he would take the initiative to find someone who did and make sure the issue was "
            "resolved. That level of effort made him a go-to resource for the team."
        ),
    ),
    Reference(
        id="jeremy-blair",
        name="Jeremy Blair",
        role="Principal Engineer",
        affiliation="Optilogic",
        photo="/jeremy-blair-profile.jpeg",
        text=(
            "There were several situations where Ryan uncovered problems within an application that were "
            "outside the scope of what he was asked to test. He thinks like the engineer he is and knows how "
            "to solve problems. I have no reservations about recommending him for any development related role."
        ),
    ),
    Reference(
        id="wyatt-penrod",
        name="Wyatt Penrod",
        role="Director of QA",
        affiliation="Vivint",
        photo="/vivint-logo.png",
        text="Ryan is the fastest hire to value that I've ever had.",
    ),
)

KNOWLEDGE_BASE = {
    "personality_traits": (
        "Problem solver who tackles complex challenges with innovative solutions",
        "Strong communicator who bridges technical and business requirements",
        "Continuous learner staying current with emerging technologies",
        "Team player who mentors and elevates those around them",
    ),
    "key_accomplishments": (
        Accomplishment(
            title="99.6% Cost Reduction",
            description=(
                "Re-architected automation system at Optilogic using self-hosted runners, nearly eliminating "
                "monthly cloud spending while improving performance."
            ),
            skills=("AWS", "GCP", "Test Automation", "Backend Systems"),
        ),
        Accomplishment(
            title="Quantum-Resistant Security Platform",
            description=(
                "Built a HIPAA-compliant social networking platform with patented post-quantum encryption, "
                "preparing for the future of cybersecurity."
            ),
            skills=("Post-quantum Encryption", "TypeScript", "React", "Azure"),
        ),
        Accomplishment(
            title="AI Paralegal Development",
            description=(
                "Created an AI agent capable of handling client communication, document management, scheduling, "
                "and medical coordination for personal injury law firms."
            ),
            skills=("AI Integration", "Python", "Backend Systems"),
        ),
        Accomplishment(
            title="240% Faster Bug Discovery",
            description=(
                "Implemented proactive, autonomous QA system replacing reactive manual testing, dramatically "
                "accelerating the development feedback loop."
            ),
            skills=("Test Automation", "JavaScript", "Python"),
        ),
        Accomplishment(
            title="30% Regression Test Improvement",
            description=(
                "Migrated CI/CD pipeline to custom test scheduler at Vivint, significantly improving test "
                "performance and reliability."
            ),
            skills=("CI/CD", "Python", "Docker", "Test Automation"),
        ),
    ),
    "interview_answers": {
        "why_hire": (
            "Ryan brings a rare combination: deep technical expertise in modern technologies (TypeScript, "
            "Python, cloud platforms, AI) combined with a proven track record of delivering business impact. "
            "His 99.6% cost reduction and 240% improvement in bug discovery speed reflect a mindset of "
            "continuous optimization."
        ),
        "strengths": (
            "His greatest strengths are systems thinking and the ability to execute. His work on post-quantum "
            "encryption shows he's thinking years ahead, while his automation work shows he can deliver "
            "immediate, measurable value."
        ),
        "work_style": (
            "Ryan thrives in environments where he can own problems end-to-end. He's collaborative but "
            "autonomous, able to work remotely or in-office with equal effectiveness, and a natural mentor "
            "who elevates team capabilities."
        ),
    },
}


def find_skill(name: str) -> Skill | None:
    key = str(name or "").strip().lower()
    for skill in SKILLS:
        if skill.name.lower() == key:
            return skill
    return None


def find_experience(experience_id: str) -> Experience | None:
    for experience in EXPERIENCES:
        if experience.id == experience_id:
            return experience
    return None
