"""
Informational pages of the DIVECAR Osasco site.

The marketing pages carry fixed institutional text; each page is a plain
dict ready to be serialized, keyed by its URL slug.
"""

from typing import Dict, List, Optional

HOME_PAGE = {
    "title": "Explore a DIVECAR Osasco",
    "description": "Dedicados à investigação e repressão de furtos e roubos de veículos e cargas em Osasco.",
    "cards": [
        {
            "title": "Nossa Hierarquia",
            "description": "Conheça a estrutura de cargos e carreiras da Polícia Civil na DIVECAR Osasco.",
            "href": "/hierarchy",
        },
        {
            "title": "Nossa História",
            "description": "Descubra a trajetória e os marcos importantes da DIVECAR em Osasco.",
            "href": "/history",
        },
        {
            "title": "Sobre Nós",
            "description": "Saiba mais sobre a missão, visão e valores da DIVECAR Osasco.",
            "href": "/about",
        },
    ],
    "videos": [
        {
            "title": "Nossa Identidade Visual",
            "description": "Conheça os detalhes e o simbolismo por trás dos uniformes e insígnias da Polícia Civil.",
            "src": "/videos/divecar2.mp4",
        },
        {
            "title": "Nossas Operações em Destaque",
            "description": "Veja um pouco mais da nossa atuação e dedicação em campo.",
            "src": "/videos/divecar.mp4",
        },
    ],
    "commitment": {
        "title": "Compromisso com Osasco",
        "text": (
            "A DIVECAR Osasco é composta por profissionais dedicados e altamente qualificados, "
            "focados na investigação criminal para desvendar e coibir crimes de furto e roubo de "
            "veículos e cargas, visando a segurança e a justiça para a população de Osasco."
        ),
    },
}

ABOUT_PAGE = {
    "title": "Sobre a GCM de Osasco",
    "description": "Guarda Civil Municipal de Osasco. Comprometidos com a proteção e o serviço à comunidade.",
    "who_we_are": [
        "A Guarda Civil Municipal (GCM) de Osasco é uma instituição de segurança pública, "
        "uniformizada e armada, com a função primordial de proteger o patrimônio, bens, "
        "serviços e instalações públicas municipais.",
        "Nossos agentes são a linha de frente no patrulhamento preventivo da cidade, colaborando "
        "com as demais forças de segurança e atuando próximos à comunidade para construir um "
        "ambiente mais seguro para todos.",
    ],
    "sections": [
        {
            "title": "Nossa Missão",
            "content": "Proteger os cidadãos, o patrimônio público e o meio ambiente do município de "
                       "Osasco, atuando de forma preventiva e comunitária, garantindo a ordem e a "
                       "segurança urbana com respeito e dedicação.",
        },
        {
            "title": "Nossa Visão",
            "content": "Ser uma Guarda Civil Municipal de referência, reconhecida pela excelência no "
                       "serviço prestado, pela integração com a comunidade e pela inovação em "
                       "políticas de segurança pública municipal.",
        },
        {
            "title": "Nossos Valores",
            "content": "Hierarquia, Disciplina, Respeito, Probidade, Coragem e Profissionalismo. "
                       "Estes são os pilares que guiam as ações de cada um dos nossos agentes em "
                       "seu serviço diário à população de Osasco.",
        },
    ],
    "duties": [
        "Patrulhamento preventivo e comunitário.",
        "Proteção do patrimônio ecológico, histórico, cultural e arquitetônico.",
        "Apoio às ações de fiscalização do Município.",
        "Colaboração com a segurança escolar e de eventos.",
        "Atuação na segurança do trânsito em conjunto com os órgãos competentes.",
    ],
}

HISTORY_PAGE = {
    "title": "Nossa História - GCM Osasco",
    "description": "Uma trajetória de compromisso e serviço na proteção da cidade de Osasco e de seus cidadãos.",
    "events": [
        {
            "year": "1993",
            "title": "Criação da Guarda Municipal de Osasco",
            "description": "Através da Lei Municipal nº 2.659, é oficialmente criada a Guarda Municipal "
                           "de Osasco, com a missão inicial de zelar pelos bens, equipamentos e "
                           "prédios públicos do município.",
        },
        {
            "year": "2002",
            "title": "Ampliação das Atribuições",
            "description": "A GCM passa a ter um papel mais ativo na segurança pública, com a "
                           "implementação do patrulhamento preventivo e comunitário, aproximando a "
                           "corporação dos cidadãos.",
        },
        {
            "year": "2014",
            "title": "Estatuto Geral das Guardas Municipais",
            "description": "Com a sanção da Lei Federal 13.022, a GCM de Osasco, assim como as demais "
                           "do país, tem suas competências ampliadas e consolidadas, incluindo o poder "
                           "de polícia administrativa.",
        },
        {
            "year": "2020",
            "title": "Modernização e Tecnologia",
            "description": "A GCM de Osasco investe em novas tecnologias, como centrais de "
                           "monitoramento por câmeras, novas viaturas e equipamentos, para aprimorar "
                           "a eficiência e a resposta às ocorrências.",
        },
        {
            "year": "Presente",
            "title": "Compromisso Contínuo com a Cidade",
            "description": "A GCM segue em constante evolução, capacitando seus agentes e fortalecendo "
                           "sua presença para fazer de Osasco uma cidade cada vez mais segura para se "
                           "viver.",
        },
    ],
}

HIERARCHY_PAGE = {
    "title": "Hierarquia da Polícia Civil",
    "description": "Conheça os cargos e funções que compõem a estrutura da Polícia Civil, incluindo "
                   "os atuantes na DIVECAR Osasco.",
    "ranks": [
        {
            "name": "Delegado de Polícia",
            "description": "Preside inquéritos policiais, coordena equipes de investigação, analisa "
                           "provas, representa pela decretação de medidas cautelares e lidera a "
                           "unidade ou equipes especializadas.",
        },
        {
            "name": "Médico Legista",
            "description": "Realiza exames de corpo de delito em vivos e mortos, analisa lesões "
                           "corporais, determina a causa mortis e elabora laudos técnicos essenciais "
                           "para a investigação criminal.",
        },
        {
            "name": "Perito Criminal",
            "description": "Coleta e analisa vestígios em locais de crime, examina evidências em "
                           "laboratório (balística, DNA, informática forense, etc.) e elabora laudos "
                           "periciais fundamentais para a elucidação de crimes.",
        },
        {
            "name": "Investigador de Polícia",
            "description": "Realiza diligências investigativas, coleta de provas, oitivas, campanas, "
                           "infiltrações e outras atividades de campo e inteligência para a "
                           "elucidação de crimes e identificação de autores.",
        },
        {
            "name": "Escrivão de Polícia",
            "description": "Responsável pela formalização dos atos de polícia judiciária, como "
                           "depoimentos, autos de prisão, e pela guarda, organização e tramitação de "
                           "inquéritos e outros procedimentos policiais.",
        },
        {
            "name": "Agente Policial",
            "description": "Auxilia nas atividades investigativas e operacionais, executa mandados, "
                           "conduz viaturas, realiza escoltas, garante a segurança de instalações "
                           "policiais e presta apoio logístico às equipes.",
        },
    ],
}

RECRUITMENT_PAGE = {
    "title": "Concurso Público - GCM Osasco",
    "description": "A Prefeitura de Osasco anuncia concurso público para ingresso na Guarda Civil "
                   "Municipal – 3ª Classe.",
    "stages": [
        "Prova Objetiva",
        "Teste de Aptidão Física (TAF)",
        "Avaliação Psicológica",
        "Investigação Social",
        "Curso de Formação",
    ],
    "requirements": [
        "Ser brasileiro nato ou naturalizado",
        "Ter idade mínima de 18 anos",
        "Estar em dia com as obrigações eleitorais e militares",
        "Possuir CNH categoria mínima “AB”",
        "Ter aptidão física e mental para o exercício da função",
    ],
    "benefits": [
        "Estabilidade",
        "Plano de progressão funcional",
        "Capacitação contínua",
        "Valorização profissional",
    ],
    "links": [
        {
            "label": "Inscrição",
            "url": "https://docs.google.com/forms/d/e/1FAIpQLSe0CSW1EPkB-k3zoztqe_pbKQ2LHQCi8StwDucikG2f_b5Beg/viewform?usp=header",
        },
        {
            "label": "Discord",
            "url": "https://discord.gg/HTQMxZKV77",
        },
    ],
}

STOLEN_VEHICLES_PAGE = {
    "title": "Veículos Furtados/Roubados",
    "description": "Consulte informações sobre veículos com queixa de furto ou roubo.",
    "under_development": True,
    "notice": "Esta seção para cadastro e consulta de veículos furtados/roubados está sendo "
              "preparada e estará disponível em breve.",
}

PAGES: Dict[str, dict] = {
    "home": HOME_PAGE,
    "about": ABOUT_PAGE,
    "history": HISTORY_PAGE,
    "hierarchy": HIERARCHY_PAGE,
    "recruitment": RECRUITMENT_PAGE,
    "stolen-vehicles": STOLEN_VEHICLES_PAGE,
}


def list_pages() -> List[str]:
    """Slugs of every informational page."""
    return list(PAGES)


def get_page(slug: str) -> Optional[dict]:
    return PAGES.get(slug)
