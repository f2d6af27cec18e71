search_template = """Gere uma lista de {count} vídeos fictícios mas realistas do YouTube sobre o tema: "{query}".
    A lista deve ser em JSON seguindo o formato:
    Array<{{ id: string, title: string, channel: string, duration: string, thumbnail: string, views: string, published: string }}>.
    Use URLs de imagens do Picsum para as thumbnails."""

transcription_template = """Aja como um transcritor profissional. Gere uma transcrição detalhada em português (PT-BR) de um vídeo do YouTube com o título "{title}" do canal "{channel}".
    O texto deve parecer uma fala natural de um churrasqueiro especialista, contendo dicas, passos e entusiasmo."""

article_template = """
    Aja como um redator especialista em SEO para o site "{site_name}".
    Com base no vídeo: "{title}" e na transcrição: "{transcription}",
    gere um artigo de alta qualidade do tipo "{article_type}" focado nas palavras-chave: {keywords}.
    O artigo deve ter aproximadamente {word_count} palavras.

    Regras:
    - Use HTML para formatação (h2, h3, p, strong, ul, li).
    - Inclua as seguintes seções conforme solicitado: FAQ ({include_faq}), Dicas ({include_tips}), Receitas ({include_recipes}), Equipamentos ({include_equipment}).
    - O tom deve ser profissional porém apaixonado por churrasco.
    - Otimize para SEO (densidade de palavras-chave, headings).

    Retorne o resultado em JSON com: title, content (HTML), seoScore (0-100), wordCount, readingTime (minutos), keywordDensity (porcentagem), headingCount, internalLinks, imageCount, metaTags (formatado em texto).
    """
