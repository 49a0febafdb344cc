from .base_client import TopicTemplateSimulator


class OpenAISimulator(TopicTemplateSimulator):
    """
    Simulated OpenAI provider.
    Answers with canned GPT-4 style analysis instead of calling the OpenAI API.
    """

    provider_name = "openai"
    source = "OpenAI GPT-4"
    title_prefix = "OpenAI Analysis"
    default_model = "gpt-4-simulated"

    topics = {
        "technology": (
            "The latest advancements in technology show significant progress in artificial "
            "intelligence and quantum computing. Researchers have developed new algorithms that "
            "improve efficiency by 30% while reducing computational requirements."
        ),
        "science": (
            "Recent scientific studies have revealed fascinating insights into cellular "
            "regeneration. The findings suggest potential applications in treating degenerative "
            "diseases and extending human lifespan."
        ),
        "business": (
            "Market analysis indicates a shift towards sustainable business practices. Companies "
            "adopting green technologies are seeing 25% higher customer retention rates and "
            "improved brand loyalty."
        ),
        "health": (
            "New research in health sciences points to the importance of microbiome diversity for "
            "overall wellbeing. A balanced diet rich in diverse plant foods can significantly "
            "improve gut health and immune function."
        ),
        "politics": (
            "Political analysts observe increasing polarization in democratic systems worldwide. "
            "Bridging divides requires improved communication channels and focus on shared values "
            "rather than differences."
        ),
        "education": (
            "Educational paradigms are evolving with technology integration. Personalized learning "
            "approaches show 40% better outcomes in student engagement and knowledge retention "
            "compared to traditional methods."
        ),
    }

    generic_content = (
        "Based on the available information, this query requires a nuanced understanding of "
        "multiple factors. Consider exploring specific aspects to get more detailed insights."
    )

    closing_template = (
        'This analysis is based on processing your query "{query}" through advanced language '
        "models. For more specific information, please refine your question with additional details."
    )
