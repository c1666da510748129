# ============================================================================
# src/genotype_ingestion/prompts/report_prompts.py
# ============================================================================
"""
Genetic Report Prompt Templates

Provides:
- One report template per category (methylation, carrier, nutrition, ...)
- Shared profile metadata and response guidelines
- Custom prompt and direct-answer overrides
- Query-only prompts for questions asked without genetic data

The rendered prompt is handed to the report-generation collaborator, which
owns the actual language-model call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..utils.exceptions import PromptTemplateError


class ReportType(str, Enum):
    """Report topics with a dedicated prompt"""
    SUMMARY = "summary"
    METHYLATION = "methylation"
    CARRIER = "carrier"
    NUTRITION = "nutrition"
    EXERCISE = "exercise"
    MEDICATION = "medication"
    ANCESTRY = "ancestry"
    DISEASE_RISK = "diseaseRisk"
    GENERAL = "general"


REPORT_TYPE_ALIASES = {
    "disease_risk": ReportType.DISEASE_RISK,
    "disease-risk": ReportType.DISEASE_RISK,
}

DIRECT_ANSWER_RESPONSE_TYPE = "direct_answer"


@dataclass
class PromptTemplate:
    """Prompt template"""
    name: str
    template: str
    required_fields: List[str]
    optional_fields: List[str] = field(default_factory=list)

    def format(self, **kwargs) -> str:
        """
        Format template with provided values.

        Raises:
            PromptTemplateError: if a required field is missing
        """
        missing = [f for f in self.required_fields if f not in kwargs]
        if missing:
            raise PromptTemplateError(
                f"Missing required fields for {self.name}: {missing}",
                template_name=self.name,
                missing_fields=missing,
            )

        values = {f: "" for f in self.optional_fields}
        values.update(kwargs)
        return self.template.format(**values)


SYSTEM_PREAMBLE = "You are a genetic analysis specialist interpreting SNP data."

METADATA_TEMPLATE = PromptTemplate(
    name="profile_metadata",
    template="""
USER'S GENETIC PROFILE:
- Total SNPs in dataset: {total_variants}
- Relevant SNPs identified: {relevant_variants}
""",
    required_fields=["total_variants", "relevant_variants"],
)

SHARED_GUIDELINES = """
RESPONSE FORMAT REQUIREMENTS:
- Use markdown formatting (### for main headings, #### for subheadings)
- Structure information hierarchically with clear sections
- Use bullet points (- ) for lists
- Highlight key findings with **bold text**
- Separate major sections with horizontal rules (---)
- Include scientific context for each finding
- End with a concise conclusion WITHOUT questions

OUTPUT STYLE:
- Be scientifically accurate but accessible
- Focus on actionable insights
- Clearly indicate confidence levels
- Mention known limitations of the analysis
- Avoid deterministic statements about genetic predispositions
"""

CUSTOM_PROMPT_TEMPLATE = PromptTemplate(
    name="custom_prompt",
    template="""{preamble}
{metadata}
KEY GENETIC MARKERS:
{variant_text}

{custom_prompt}""",
    required_fields=["preamble", "metadata", "variant_text", "custom_prompt"],
)

DIRECT_ANSWER_REQUIREMENTS = """

DIRECT ANSWER REQUIREMENTS:
- Provide a brief, conversational response (2-3 sentences when possible)
- Skip the formal report structure and markdown formatting
- Use plain language without technical jargon unless specifically needed
- Get straight to the point with the most relevant information
- Focus only on answering what was asked without additional details
"""

DIRECT_ANSWER_QUERY = "Give me a direct, brief answer to this question: {question}"


@dataclass
class ReportTemplate:
    """Category-specific report prompt"""
    report_type: ReportType
    task: str
    markers_heading: str
    requirements: List[str]
    sections: List[str]
    user_query: str
    focus_genes: List[str] = field(default_factory=list)

    def render(self, metadata: str, variant_text: str) -> str:
        parts = [
            SYSTEM_PREAMBLE,
            metadata,
            f"TASK: {self.task}\n",
            f"{self.markers_heading}:\n{variant_text}",
        ]
        if self.focus_genes:
            parts.append("CRITICAL GENES TO FOCUS ON:\n" + "\n".join(f"- {g}" for g in self.focus_genes) + "\n")
        parts.append("ANALYSIS REQUIREMENTS:\n" + "\n".join(f"- {r}" for r in self.requirements) + "\n")
        parts.append(
            "SPECIFIC SECTIONS TO INCLUDE:\n"
            + "\n".join(f"{i}. {s}" for i, s in enumerate(self.sections, start=1))
        )
        parts.append(SHARED_GUIDELINES)
        return "\n".join(parts)


REPORT_TEMPLATES: Dict[ReportType, ReportTemplate] = {
    ReportType.SUMMARY: ReportTemplate(
        report_type=ReportType.SUMMARY,
        task="Create a comprehensive summary of the user's genetic profile, highlighting the most "
             "significant findings across all major categories.",
        markers_heading="KEY MARKERS TO ANALYZE",
        requirements=[
            "Provide a holistic overview of the genetic data",
            "Organize findings by health importance and actionability",
            "Highlight 3-5 most significant/actionable genetic insights",
            "Include brief implications for health, nutrition, and medication response",
            "Summarize ancestry information if relevant markers are present",
        ],
        sections=[
            '"Key Genetic Insights" - Most important findings that impact health',
            '"Potential Health Considerations" - Areas that may warrant attention',
            '"Genetic Strengths" - Positive genetic variants',
            '"Actionable Recommendations" - Evidence-based suggestions',
        ],
        user_query="Create a comprehensive summary of my genetic profile that highlights the most "
                   "significant findings and provides actionable insights. Focus on the most important "
                   "health implications of my genetic variants.",
    ),
    ReportType.METHYLATION: ReportTemplate(
        report_type=ReportType.METHYLATION,
        task="Analyze methylation-related genetic markers to assess the user's methylation cycle function.",
        markers_heading="KEY METHYLATION MARKERS",
        focus_genes=[
            "MTHFR (rs1801133, rs1801131) - Folate metabolism and methylation",
            "CBS (rs234706) - Homocysteine metabolism",
            "MTR (rs1805087) - Methionine synthase, B12-dependent methylation",
            "MTRR (rs1801394) - Methionine synthase reductase",
            "COMT (rs4680) - Catechol-O-methyltransferase, neurotransmitter metabolism",
        ],
        requirements=[
            "Assess methylation cycle efficiency based on the available markers",
            "Evaluate homocysteine metabolism implications",
            "Analyze folate and B-vitamin metabolism",
            "Discuss implications for neurotransmitter metabolism if relevant",
            "Provide methyl donor considerations",
        ],
        sections=[
            '"Methylation Pathway Analysis" - Overall assessment of methylation function',
            '"Nutrient Metabolism" - How variants affect B-vitamin needs',
            '"Homocysteine Considerations" - Potential impact on homocysteine levels',
            '"Methylation Support Strategies" - Evidence-based recommendations',
        ],
        user_query="Analyze my methylation-related genetic markers and provide insights about my "
                   "methylation cycle function. Focus on MTHFR, CBS, MTR, and other key methylation "
                   "genes, explaining how these variants might impact my health and what nutritional "
                   "considerations would be appropriate.",
    ),
    ReportType.CARRIER: ReportTemplate(
        report_type=ReportType.CARRIER,
        task="Analyze genetic markers associated with carrier status for inherited conditions.",
        markers_heading="KEY CARRIER STATUS MARKERS",
        focus_genes=[
            "CFTR (rs113993960) - Cystic fibrosis",
            "HEXA (rs80338939) - Tay-Sachs disease",
            "ASPA (rs28897696) - Canavan disease",
            "SMN1 (rs28897617) - Spinal muscular atrophy",
            "HBB (rs334) - Sickle cell anemia",
            "G6PD (rs1050828) - Glucose-6-phosphate dehydrogenase deficiency",
        ],
        requirements=[
            "Determine carrier status for recessive genetic conditions",
            "Assess heterozygous vs homozygous status for each variant",
            "Explain the clinical significance of each relevant marker",
            "Provide context about population frequency",
            "Discuss implications for family planning if appropriate",
        ],
        sections=[
            '"Carrier Status Overview" - Summary of all findings',
            '"Detailed Variant Analysis" - Gene-by-gene assessment',
            '"Clinical Implications" - Relevance to health and reproduction',
            '"Limitations and Considerations" - Explain what wasn\'t tested',
        ],
        user_query="Analyze my genetic markers for carrier status of inherited conditions. Determine if "
                   "I carry any variants associated with recessive genetic disorders like cystic "
                   "fibrosis, Tay-Sachs, or others. Explain the clinical significance of any findings "
                   "and what they mean for family planning.",
    ),
    ReportType.NUTRITION: ReportTemplate(
        report_type=ReportType.NUTRITION,
        task="Analyze genetic markers related to nutrition, diet response, and nutrient metabolism.",
        markers_heading="KEY NUTRITION-RELATED MARKERS",
        focus_genes=[
            "MCM6/LCT (rs4988235) - Lactose tolerance/intolerance",
            "APOE (rs429358, rs7412) - Fat metabolism and response",
            "MTHFR (rs1801133, rs1801131) - Folate metabolism",
            "FUT2 (rs601338) - Vitamin B12 absorption",
            "VDR (rs1544410) - Vitamin D receptor function",
            "BCMO1 (rs12934922) - Beta-carotene conversion",
            "HFE (rs1800562, rs1799945) - Iron absorption and hemochromatosis risk",
        ],
        requirements=[
            "Assess macronutrient metabolism and optimal ratios",
            "Evaluate micronutrient needs and potential deficiency risks",
            "Analyze dietary sensitivity patterns (lactose, gluten, etc.)",
            "Determine optimal diet type based on genetic variants",
            "Provide specific nutrient recommendations",
        ],
        sections=[
            '"Macronutrient Metabolism" - Protein, fat, carbohydrate processing',
            '"Micronutrient Needs" - Vitamins and minerals requiring attention',
            '"Food Sensitivities" - Genetic predispositions to food intolerances',
            '"Dietary Recommendations" - Evidence-based nutritional guidance',
        ],
        user_query="Analyze my nutrition-related genetic markers and provide personalized dietary "
                   "insights. Focus on how my genes affect macronutrient metabolism, micronutrient "
                   "needs, and potential food sensitivities. Include specific recommendations for my "
                   "optimal diet based on my genetic profile.",
    ),
    ReportType.EXERCISE: ReportTemplate(
        report_type=ReportType.EXERCISE,
        task="Analyze genetic markers related to exercise response, recovery, and athletic performance.",
        markers_heading="KEY EXERCISE-RELATED MARKERS",
        focus_genes=[
            "ACTN3 (rs1815739) - Fast-twitch muscle fiber composition",
            "ACE (rs1799752) - Endurance vs. power performance",
            "PPARA (rs4253778) - Energy metabolism, endurance capacity",
            "PPARGC1A (rs8192678) - Mitochondrial function, aerobic capacity",
            "COL5A1 (rs12722) - Collagen production, injury risk",
            "VEGF (rs2010963) - Vascular growth, oxygen delivery",
            "IL6 (rs1800795) - Recovery and inflammation response",
        ],
        requirements=[
            "Determine power vs. endurance genetic profile",
            "Assess injury risk factors",
            "Evaluate recovery efficiency",
            "Analyze optimal training response patterns",
            "Provide exercise recommendations aligned with genetic predispositions",
        ],
        sections=[
            '"Exercise Response Profile" - Power vs. endurance tendencies',
            '"Recovery Factors" - Genetic influences on recovery capacity',
            '"Injury Risk Assessment" - Genetic factors affecting injury potential',
            '"Training Recommendations" - Personalized exercise strategies',
        ],
        user_query="Analyze my exercise-related genetic markers and provide insights about my optimal "
                   "fitness approach. Focus on power vs. endurance tendencies, recovery factors, injury "
                   "risks, and the types of training my body might respond to best based on my genetic "
                   "profile.",
    ),
    ReportType.MEDICATION: ReportTemplate(
        report_type=ReportType.MEDICATION,
        task="Analyze pharmacogenomic markers related to medication metabolism and response.",
        markers_heading="KEY PHARMACOGENOMIC MARKERS",
        focus_genes=[
            "CYP2D6 (rs3892097) - Metabolism of many medications including antidepressants",
            "CYP2C19 (rs4244285) - Metabolism of proton pump inhibitors, antidepressants",
            "CYP2C9 (rs1799853, rs1057910) - Warfarin and NSAID metabolism",
            "VKORC1 (rs9923231) - Warfarin sensitivity",
            "SLCO1B1 (rs4149056) - Statin transport and side effects",
            "CYP1A2 (rs762551) - Caffeine and some medication metabolism",
            "COMT (rs4680) - Dopamine regulation, pain medication response",
        ],
        requirements=[
            "Classify metabolizer status for key drug-processing enzymes",
            "Evaluate potential medication response variations",
            "Identify potential adverse reaction risks",
            "Provide guidance on medication considerations",
            "Include clinically validated gene-drug interactions",
        ],
        sections=[
            '"Medication Metabolism Profile" - CYP enzyme function overview',
            '"Drug-Specific Considerations" - Implications for common medications',
            '"Potential Sensitivities" - Areas requiring caution',
            '"Clinical Recommendations" - Guidance for healthcare discussions',
        ],
        user_query="Analyze my pharmacogenomic markers and provide insights about how my body processes "
                   "medications. Focus on my metabolizer status for key enzymes like CYP2D6, CYP2C19, "
                   "and CYP2C9, and explain how these variations might affect my response to common "
                   "medications. Include information about potential sensitivities or adverse "
                   "reactions I should be aware of.",
    ),
    ReportType.ANCESTRY: ReportTemplate(
        report_type=ReportType.ANCESTRY,
        task="Analyze ancestry-informative markers to determine genetic heritage and population origins.",
        markers_heading="KEY ANCESTRY-INFORMATIVE MARKERS",
        focus_genes=[
            "SLC45A2 (rs16891982) - European/non-European ancestry",
            "SLC24A5 (rs1426654) - European/African ancestry",
            "EDAR (rs3827760) - East Asian ancestry",
            "DARC (rs2814778) - African ancestry",
            "HERC2 (rs12913832) - European eye color and ancestry",
            "LCT (rs4988235) - European ancestry, lactase persistence",
            "RHD (rs590787) - Blood type and regional ancestry associations",
        ],
        requirements=[
            "Identify likely continental ancestry components",
            "Analyze regional population affiliations when possible",
            "Evaluate admixture patterns if evident",
            "Discuss haplogroup information if markers are available",
            "Provide historical context for genetic heritage",
        ],
        sections=[
            '"Ancestry Composition" - Continental and regional genetic heritage',
            '"Population Affiliations" - Specific population connections',
            '"Historical Context" - Migration patterns relevant to genetic profile',
            '"Trait Associations" - Ancestry-related trait information',
        ],
        user_query="Analyze my ancestry-informative genetic markers and provide insights about my "
                   "genetic heritage. Identify my likely continental and regional ancestry components, "
                   "any admixture patterns, and provide historical context for my genetic profile.",
    ),
    ReportType.DISEASE_RISK: ReportTemplate(
        report_type=ReportType.DISEASE_RISK,
        task="Analyze genetic markers associated with disease risk and health predispositions.",
        markers_heading="KEY DISEASE RISK MARKERS",
        focus_genes=[
            "APOE (rs429358, rs7412) - Cardiovascular health and cognitive function",
            "MTHFR (rs1801133) - Cardiovascular health considerations",
            "9p21 locus (rs10757278) - Cardiovascular disease risk",
            "TCF7L2 (rs7903146) - Type 2 diabetes risk",
            "FTO (rs9939609) - Obesity risk factor",
            "BRCA1/2 (if present) - Breast and ovarian cancer risk factors",
            "GDF5 (rs143383) - Osteoarthritis risk",
            "SMAD7 (rs4939827) - Colorectal cancer risk association",
        ],
        requirements=[
            "Evaluate genetic risk factors with strong scientific evidence",
            "Provide context about relative risk vs. absolute risk",
            "Compare genetic findings to general population risk",
            "Emphasize modifiable factors that interact with genetic risk",
            "Include preventative strategies and screening recommendations",
        ],
        sections=[
            '"Risk Assessment Overview" - Summary of key findings',
            '"Cardiovascular Health Factors" - Heart and vascular health markers',
            '"Metabolic Health Considerations" - Diabetes and related conditions',
            '"Other Health Predispositions" - Additional significant findings',
            '"Preventative Strategies" - Evidence-based risk reduction approaches',
        ],
        user_query="Analyze my disease risk genetic markers and provide insights about my health "
                   "predispositions. Focus on evidence-based associations, explaining relative risk "
                   "compared to the general population, and include preventative strategies that could "
                   "help mitigate any genetic risks identified.",
    ),
    ReportType.GENERAL: ReportTemplate(
        report_type=ReportType.GENERAL,
        task="Analyze the provided genetic markers to give the user actionable health insights.",
        markers_heading="KEY GENETIC MARKERS",
        requirements=[
            "Identify the most significant health-related findings",
            "Provide context for each relevant genetic variant",
            "Explain potential implications for health and wellness",
            "Offer evidence-based recommendations when appropriate",
            "Cover multiple health domains (metabolism, response to environment, etc.)",
        ],
        sections=[
            '"Key Genetic Findings" - Most significant variants',
            '"Health Implications" - Potential impact on health',
            '"Actionable Insights" - Practical recommendations',
            '"Limitations" - What this analysis doesn\'t cover',
        ],
        user_query="Analyze my genetic markers and provide a comprehensive health assessment based on my "
                   "DNA data. Focus on the most significant findings that may impact my health and "
                   "wellness, and include actionable recommendations.",
    ),
}


# ============================================================================
# QUERY-ONLY PROMPTS (no genetic data)
# ============================================================================

class QueryMode(str, Enum):
    GENERAL = "general"  # question asked without an upload
    SEARCH = "search"    # standalone genetic concept lookup


GENERAL_QUERY_PROMPT = PromptTemplate(
    name="general_query",
    template="You are a genetic analysis assistant. The user is asking questions about genetic data, "
             "but no genetic data has been provided. Give a general response about the genetic "
             "concept they are asking about.",
    required_fields=[],
)

SEARCH_PROMPT = PromptTemplate(
    name="search",
    template="You are a genetic information assistant. Provide concise, accurate information about "
             "genetic concepts, SNPs, and genetic health topics.",
    required_fields=[],
)

SEARCH_DIRECT_ANSWER_PROMPT = PromptTemplate(
    name="search_direct_answer",
    template="""You are a genetic information assistant. Provide direct, brief answers using plain language.
Focus only on answering the question without additional context or explanations unless necessary.
Avoid using technical jargon and formal report structures.""",
    required_fields=[],
)

QUERY_TEMPLATES: Dict[QueryMode, PromptTemplate] = {
    QueryMode.GENERAL: GENERAL_QUERY_PROMPT,
    QueryMode.SEARCH: SEARCH_PROMPT,
}


@dataclass
class ReportPrompt:
    """System prompt plus the user query for one report or query-only request"""
    report_type: Optional[ReportType]
    system_prompt: str
    user_query: str
    query_mode: Optional[QueryMode] = None


def resolve_report_type(report_type: Optional[str]) -> ReportType:
    """Map a free-form report name to a ReportType; unknown names get GENERAL."""
    if not report_type:
        return ReportType.GENERAL
    if report_type in REPORT_TYPE_ALIASES:
        return REPORT_TYPE_ALIASES[report_type]
    try:
        return ReportType(report_type)
    except ValueError:
        return ReportType.GENERAL


def build_metadata_section(total_variants: int, relevant_variants: int) -> str:
    return METADATA_TEMPLATE.format(
        total_variants=total_variants,
        relevant_variants=relevant_variants,
    )


def build_report_prompt(
    report_type: Optional[str],
    total_variants: int,
    relevant_variants: int,
    variant_text: str,
    custom_prompt: Optional[str] = None,
    direct_answer: bool = False,
    custom_instructions: Optional[str] = None,
) -> ReportPrompt:
    """
    Build the report prompt for a category.

    Args:
        report_type: Category name (unknown names use the general template)
        total_variants: Variants extracted from the whole file
        relevant_variants: Variants selected for this report
        variant_text: Output of format_for_prompt
        custom_prompt: Replaces the category task/requirements when given
        direct_answer: Append brief-answer requirements
        custom_instructions: Extra instructions; implies direct_answer

    Returns:
        ReportPrompt with system prompt and default user query
    """
    resolved = resolve_report_type(report_type)
    template = REPORT_TEMPLATES[resolved]
    metadata = build_metadata_section(total_variants, relevant_variants)

    if custom_prompt:
        system_prompt = CUSTOM_PROMPT_TEMPLATE.format(
            preamble=SYSTEM_PREAMBLE,
            metadata=metadata,
            variant_text=variant_text,
            custom_prompt=custom_prompt,
        )
    else:
        system_prompt = template.render(metadata, variant_text)

    user_query = template.user_query

    if direct_answer or custom_instructions:
        system_prompt = system_prompt + DIRECT_ANSWER_REQUIREMENTS + (custom_instructions or "")
        user_query = DIRECT_ANSWER_QUERY.format(question=user_query)

    return ReportPrompt(
        report_type=resolved,
        system_prompt=system_prompt,
        user_query=user_query,
    )


def build_query_prompt(
    query: str,
    mode: QueryMode = QueryMode.GENERAL,
    direct_answer: bool = False,
) -> ReportPrompt:
    """
    Build the prompt for a question asked without genetic data.

    GENERAL answers from general knowledge; direct_answer appends the
    brevity requirements and keeps the question as asked. SEARCH switches to
    a dedicated brief-answer system prompt and wraps the question.

    Raises:
        PromptTemplateError: if query is empty
    """
    if not query or not query.strip():
        raise PromptTemplateError(
            "A query is required when no genetic data is provided",
            template_name=QUERY_TEMPLATES[mode].name,
            missing_fields=["query"],
        )

    if mode == QueryMode.SEARCH and direct_answer:
        system_prompt = SEARCH_DIRECT_ANSWER_PROMPT.format()
        user_query = DIRECT_ANSWER_QUERY.format(question=query)
    else:
        system_prompt = QUERY_TEMPLATES[mode].format()
        user_query = query
        if direct_answer:
            system_prompt = system_prompt + DIRECT_ANSWER_REQUIREMENTS

    return ReportPrompt(
        report_type=None,
        system_prompt=system_prompt,
        user_query=user_query,
        query_mode=mode,
    )
