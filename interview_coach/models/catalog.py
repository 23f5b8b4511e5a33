"""
Role and question catalog for Smart Interview Coach

Static, read-only data. Each role maps to an ordered list of questions
with a reference answer, category and difficulty.
"""

from interview_coach.models.question import Question, QuestionDifficulty, Role


# ============================================================================
# ROLES
# ============================================================================

ROLE_CATALOG: dict[str, Role] = {
    "software-developer": Role(
        id="software-developer",
        title="Software Developer",
        description="Frontend, Backend, and Full-Stack Development",
        icon="💻",
    ),
    "data-analyst": Role(
        id="data-analyst",
        title="Data Analyst",
        description="Data Analysis, SQL, and Business Intelligence",
        icon="📊",
    ),
    "product-manager": Role(
        id="product-manager",
        title="Product Manager",
        description="Product Strategy, Roadmapping, and User Experience",
        icon="🎯",
    ),
    "marketing-specialist": Role(
        id="marketing-specialist",
        title="Marketing Specialist",
        description="Digital Marketing, Content, and Brand Strategy",
        icon="📢",
    ),
    "ux-designer": Role(
        id="ux-designer",
        title="UX Designer",
        description="User Experience, Design Systems, and Prototyping",
        icon="🎨",
    ),
    "sales-representative": Role(
        id="sales-representative",
        title="Sales Representative",
        description="B2B Sales, Client Relations, and Revenue Growth",
        icon="🤝",
    ),
}


# ============================================================================
# QUESTIONS BY ROLE
# ============================================================================

QUESTION_CATALOG: dict[str, list[Question]] = {
    "software-developer": [
        Question(
            id="sd-1",
            text="Explain the difference between REST and GraphQL APIs.",
            sample_answer=(
                "REST is an architectural style that uses standard HTTP methods and endpoints for "
                "different resources, while GraphQL is a query language that allows clients to request "
                "exactly the data they need through a single endpoint. REST typically involves multiple "
                "round trips for related data, whereas GraphQL can fetch all required data in one "
                "request, reducing over-fetching and under-fetching issues."
            ),
            category="Technical Knowledge",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="sd-2",
            text="How do you handle version control in a team environment?",
            sample_answer=(
                "I follow Git best practices including creating feature branches for new work, writing "
                "descriptive commit messages, and using pull requests for code review. I ensure regular "
                "communication with team members about merge conflicts and maintain a clean commit "
                "history through rebasing when appropriate."
            ),
            category="Process & Collaboration",
            difficulty=QuestionDifficulty.EASY,
        ),
        Question(
            id="sd-3",
            text="Describe how you would optimize a slow-performing web application.",
            sample_answer=(
                "I would start by profiling the application to identify bottlenecks using browser dev "
                "tools and performance monitoring. Common optimizations include code splitting, lazy "
                "loading, optimizing images and assets, reducing API calls through caching, using CDNs, "
                "and optimizing database queries."
            ),
            category="Problem Solving",
            difficulty=QuestionDifficulty.HARD,
        ),
        Question(
            id="sd-4",
            text="What is your approach to testing in software development?",
            sample_answer=(
                "I follow the testing pyramid: unit tests for individual functions and components, "
                "integration tests for component interactions, and end-to-end tests for critical user "
                "flows. I use mocking for external dependencies and run tests continuously in CI/CD "
                "pipelines."
            ),
            category="Best Practices",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="sd-5",
            text="Tell me about a challenging bug you solved recently.",
            sample_answer=(
                "I recently debugged a memory leak in a React application. Users reported the app "
                "becoming slow after extended use. Profiling memory usage showed that event listeners "
                "weren't being cleaned up in effect hooks. Adding proper cleanup functions resolved "
                "the issue."
            ),
            category="Problem Solving",
            difficulty=QuestionDifficulty.HARD,
        ),
    ],
    "data-analyst": [
        Question(
            id="da-1",
            text="How would you handle missing data in a dataset?",
            sample_answer=(
                "I'd first analyze the pattern of missing data to understand if it's missing completely "
                "at random, missing at random, or missing not at random. Depending on the situation I "
                "might use deletion for small amounts of random missing data, mean or median imputation "
                "for numerical data, or model-based imputation for complex patterns."
            ),
            category="Data Processing",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="da-2",
            text="Explain the difference between correlation and causation.",
            sample_answer=(
                "Correlation measures how two variables tend to change together. Causation means one "
                "variable directly influences another. Ice cream sales and drowning incidents are "
                "correlated because both increase in summer, but one doesn't cause the other. "
                "Establishing causation needs controlled experiments and elimination of confounders."
            ),
            category="Statistical Concepts",
            difficulty=QuestionDifficulty.EASY,
        ),
        Question(
            id="da-3",
            text="How do you ensure data quality in your analysis?",
            sample_answer=(
                "I profile data to understand structure and content, apply validation rules for "
                "accuracy and completeness, run consistency checks across sources, handle outliers, "
                "document data lineage, and monitor data quality metrics to catch issues early."
            ),
            category="Data Quality",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="da-4",
            text="Describe a time when you had to present complex data insights to non-technical stakeholders.",
            sample_answer=(
                "I analyzed customer churn for executives who needed actionable insights. I built a "
                "simple dashboard with churn trends, top risk factors and revenue impact, told the story "
                "starting from the business problem, and ended with specific recommendations while "
                "avoiding jargon."
            ),
            category="Communication",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="da-5",
            text="What tools and technologies do you use for data analysis?",
            sample_answer=(
                "SQL for extraction and manipulation, Python with pandas, numpy and scikit-learn for "
                "analysis and modeling, and Tableau or Power BI for visualization. I use Jupyter for "
                "exploration, Git for version control and cloud platforms for large-scale processing."
            ),
            category="Technical Skills",
            difficulty=QuestionDifficulty.EASY,
        ),
    ],
    "product-manager": [
        Question(
            id="pm-1",
            text="How do you prioritize features in a product roadmap?",
            sample_answer=(
                "I combine business value, user impact and technical feasibility, typically with RICE "
                "scoring or a value versus effort matrix. I gather stakeholder input, analyze user "
                "feedback, weigh strategic objectives and review the roadmap regularly."
            ),
            category="Product Strategy",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="pm-2",
            text="Describe how you would launch a new feature.",
            sample_answer=(
                "I'd define success metrics and the target audience, coordinate engineering and QA "
                "readiness, align positioning with marketing, and plan a phased rollout from internal "
                "testing to beta users to public release. After launch I monitor metrics and iterate."
            ),
            category="Product Launch",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="pm-3",
            text="How do you handle conflicting requirements from different stakeholders?",
            sample_answer=(
                "I make sure I understand each stakeholder's underlying needs, facilitate discussions "
                "to find trade-offs aligned with product strategy, use data and user research to "
                "support decisions, and communicate constraints transparently."
            ),
            category="Stakeholder Management",
            difficulty=QuestionDifficulty.HARD,
        ),
        Question(
            id="pm-4",
            text="What metrics do you use to measure product success?",
            sample_answer=(
                "Engagement metrics such as DAU/MAU and retention, business metrics such as revenue and "
                "conversion, product metrics such as feature adoption and satisfaction, and leading "
                "indicators of long-term success. I avoid vanity metrics."
            ),
            category="Analytics & Metrics",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="pm-5",
            text="Tell me about a time when a product feature failed. How did you handle it?",
            sample_answer=(
                "A new onboarding flow decreased conversion by 15%. Session recordings showed confusion "
                "at one step, so a cross-functional team fixed the copy and removed required fields "
                "within 48 hours, then A/B tested further improvements."
            ),
            category="Problem Solving",
            difficulty=QuestionDifficulty.HARD,
        ),
    ],
    "marketing-specialist": [
        Question(
            id="ms-1",
            text="How do you measure the success of a marketing campaign?",
            sample_answer=(
                "I set KPIs before launch based on the campaign objective: reach and brand lift for "
                "awareness, cost per lead for lead generation, ROI for sales. I track leading and "
                "lagging indicators and add qualitative measures like sentiment analysis."
            ),
            category="Campaign Analytics",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="ms-2",
            text="Describe your approach to creating buyer personas.",
            sample_answer=(
                "I start with quantitative data from analytics, surveys and sales, then add qualitative "
                "research through customer interviews. Personas cover demographics, pain points, goals, "
                "preferred channels and buying behavior, and are updated as new data arrives."
            ),
            category="Customer Research",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="ms-3",
            text="How do you stay current with digital marketing trends?",
            sample_answer=(
                "I follow industry publications, attend webinars and conferences, take part in marketing "
                "communities, maintain platform certifications and test new features early, while "
                "focusing on underlying principles rather than chasing trends."
            ),
            category="Professional Development",
            difficulty=QuestionDifficulty.EASY,
        ),
        Question(
            id="ms-4",
            text="Explain how you would develop a content marketing strategy.",
            sample_answer=(
                "I'd define content goals aligned with business objectives, research the audience, "
                "audit existing content, build content pillars and a calendar, choose distribution "
                "channels and set up measurement, including SEO and content repurposing."
            ),
            category="Content Strategy",
            difficulty=QuestionDifficulty.HARD,
        ),
        Question(
            id="ms-5",
            text="How do you handle budget allocation across different marketing channels?",
            sample_answer=(
                "I analyze historical CAC, LTV and ROAS per channel, allocate by customer journey "
                "stage, and follow a 70-20-10 split between proven, emerging and experimental channels, "
                "reallocating as performance data comes in."
            ),
            category="Budget Management",
            difficulty=QuestionDifficulty.HARD,
        ),
    ],
    "ux-designer": [
        Question(
            id="ux-1",
            text="Walk me through your design process.",
            sample_answer=(
                "Research with interviews and analytics, define personas and problem statements, ideate "
                "through sketching and workshops, prototype from wireframes to interactive mockups, and "
                "test with users, iterating throughout and collaborating with stakeholders."
            ),
            category="Design Process",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="ux-2",
            text="How do you handle stakeholder feedback that conflicts with user research?",
            sample_answer=(
                "I present the research clearly and tie it to business goals, try to understand the "
                "stakeholder's constraints, and propose designs that address both, or suggest further "
                "testing to validate the competing approaches."
            ),
            category="Stakeholder Management",
            difficulty=QuestionDifficulty.HARD,
        ),
        Question(
            id="ux-3",
            text="Describe a time when you had to design for accessibility.",
            sample_answer=(
                "I redesigned a government website to meet WCAG 2.1 AA. I audited contrast, added "
                "alternative text, ensured keyboard navigation and semantic HTML, tested with screen "
                "readers and users with disabilities, and wrote accessibility guidelines for the team."
            ),
            category="Accessibility",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="ux-4",
            text="How do you conduct effective user research?",
            sample_answer=(
                "I define research objectives, pick methods to match, recruit representative "
                "participants, use structured but flexible discussion guides, analyze findings "
                "systematically and present actionable insights with evidence."
            ),
            category="User Research",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="ux-5",
            text="What's your approach to creating a design system?",
            sample_answer=(
                "I audit existing UI elements, establish principles, build foundations like color, "
                "typography and spacing, then a documented component library. I involve developers "
                "early and set up governance for updates."
            ),
            category="Design Systems",
            difficulty=QuestionDifficulty.HARD,
        ),
    ],
    "sales-representative": [
        Question(
            id="sr-1",
            text="How do you handle objections during a sales call?",
            sample_answer=(
                "I listen for the concern behind the objection, acknowledge it, ask clarifying "
                "questions, and address it with relevant information, case studies or social proof, "
                "then confirm the objection has been resolved."
            ),
            category="Sales Techniques",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="sr-2",
            text="Describe your approach to qualifying leads.",
            sample_answer=(
                "I use a framework like BANT or MEDDIC, ask open-ended questions about challenges, "
                "decision process and timeline, identify stakeholders early and assess fit between "
                "their needs and our solution."
            ),
            category="Lead Qualification",
            difficulty=QuestionDifficulty.MEDIUM,
        ),
        Question(
            id="sr-3",
            text="How do you maintain relationships with existing clients?",
            sample_answer=(
                "Regular check-ins, proactively sharing insights and new features, responding quickly "
                "to issues, and looking for expansion opportunities that genuinely add value."
            ),
            category="Customer Success",
            difficulty=QuestionDifficulty.EASY,
        ),
        Question(
            id="sr-4",
            text="Tell me about a time you lost a significant deal. What did you learn?",
            sample_answer=(
                "I lost a six-figure deal because I didn't identify the CFO as a decision-maker early. "
                "I learned to map the whole decision-making unit upfront and confirm the process and "
                "timeline early in every deal."
            ),
            category="Learning from Failure",
            difficulty=QuestionDifficulty.HARD,
        ),
        Question(
            id="sr-5",
            text="How do you stay motivated during challenging periods?",
            sample_answer=(
                "I focus on the long-term value I provide, celebrate small wins, analyze my activities "
                "for improvements, stay connected with successful colleagues and keep developing my "
                "skills."
            ),
            category="Motivation & Mindset",
            difficulty=QuestionDifficulty.EASY,
        ),
    ],
}


def get_role(role_id: str) -> Role | None:
    """Look up a role by ID."""
    return ROLE_CATALOG.get(role_id)


def get_questions_for_role(role_id: str) -> list[Question]:
    """Get the ordered question list for a role (empty if unknown)."""
    return list(QUESTION_CATALOG.get(role_id, []))


def find_question(question_id: str) -> Question | None:
    """Find a question anywhere in the catalog."""
    for questions in QUESTION_CATALOG.values():
        for question in questions:
            if question.id == question_id:
                return question
    return None
