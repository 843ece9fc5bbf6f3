"""
Curated team alias tables, one per sport.

Each entry is the team's full name, its nickname, its home city (or the
name the city is known by in team names) and extra spellings: common
abbreviations, fan nicknames and former names.
"""

from __future__ import annotations

from dataclasses import dataclass

from sports_data.domain.enums import Sport


@dataclass(frozen=True)
class TeamAliasEntry:
    full_name: str
    nickname: str
    city: str
    aliases: tuple[str, ...] = ()


def _t(full_name: str, nickname: str, city: str, *aliases: str) -> TeamAliasEntry:
    return TeamAliasEntry(full_name=full_name, nickname=nickname, city=city, aliases=aliases)


BASKETBALL_TEAMS: tuple[TeamAliasEntry, ...] = (
    _t("Atlanta Hawks", "Hawks", "Atlanta", "atl"),
    _t("Boston Celtics", "Celtics", "Boston", "bos", "cs"),
    _t("Brooklyn Nets", "Nets", "Brooklyn", "bkn"),
    _t("Charlotte Hornets", "Hornets", "Charlotte", "cha"),
    _t("Chicago Bulls", "Bulls", "Chicago", "chi"),
    _t("Cleveland Cavaliers", "Cavaliers", "Cleveland", "cavs", "cle"),
    _t("Dallas Mavericks", "Mavericks", "Dallas", "mavs", "dal"),
    _t("Denver Nuggets", "Nuggets", "Denver", "den"),
    _t("Detroit Pistons", "Pistons", "Detroit", "det"),
    _t("Golden State Warriors", "Warriors", "Golden State", "gsw", "dubs"),
    _t("Houston Rockets", "Rockets", "Houston", "hou"),
    _t("Indiana Pacers", "Pacers", "Indiana", "ind"),
    _t("Los Angeles Clippers", "Clippers", "Los Angeles", "la clippers", "lac", "clips"),
    _t("Los Angeles Lakers", "Lakers", "Los Angeles", "la lakers", "lal"),
    _t("Memphis Grizzlies", "Grizzlies", "Memphis", "grizz", "mem"),
    _t("Miami Heat", "Heat", "Miami", "mia"),
    _t("Milwaukee Bucks", "Bucks", "Milwaukee", "mil"),
    _t("Minnesota Timberwolves", "Timberwolves", "Minnesota", "wolves", "twolves", "min"),
    _t("New Orleans Pelicans", "Pelicans", "New Orleans", "pels", "nop"),
    _t("New York Knicks", "Knicks", "New York", "ny knicks", "nyk"),
    _t("Oklahoma City Thunder", "Thunder", "Oklahoma City", "okc"),
    _t("Orlando Magic", "Magic", "Orlando", "orl"),
    _t("Philadelphia 76ers", "76ers", "Philadelphia", "sixers", "phi"),
    _t("Phoenix Suns", "Suns", "Phoenix", "phx"),
    _t("Portland Trail Blazers", "Trail Blazers", "Portland", "blazers", "por"),
    _t("Sacramento Kings", "Kings", "Sacramento", "sac"),
    _t("San Antonio Spurs", "Spurs", "San Antonio", "sas"),
    _t("Toronto Raptors", "Raptors", "Toronto", "raps", "tor"),
    _t("Utah Jazz", "Jazz", "Utah", "uta"),
    _t("Washington Wizards", "Wizards", "Washington", "wiz", "was"),
)

HOCKEY_TEAMS: tuple[TeamAliasEntry, ...] = (
    _t("Anaheim Ducks", "Ducks", "Anaheim"),
    _t("Boston Bruins", "Bruins", "Boston", "bs"),
    _t("Buffalo Sabres", "Sabres", "Buffalo"),
    _t("Calgary Flames", "Flames", "Calgary"),
    _t("Carolina Hurricanes", "Hurricanes", "Carolina", "canes"),
    _t("Chicago Blackhawks", "Blackhawks", "Chicago", "hawks"),
    _t("Colorado Avalanche", "Avalanche", "Colorado", "avs"),
    _t("Columbus Blue Jackets", "Blue Jackets", "Columbus", "cbj"),
    _t("Dallas Stars", "Stars", "Dallas"),
    _t("Detroit Red Wings", "Red Wings", "Detroit", "wings"),
    _t("Edmonton Oilers", "Oilers", "Edmonton"),
    _t("Florida Panthers", "Panthers", "Florida", "cats"),
    _t("Los Angeles Kings", "Kings", "Los Angeles", "la kings"),
    _t("Minnesota Wild", "Wild", "Minnesota"),
    _t("Montreal Canadiens", "Canadiens", "Montreal", "habs"),
    _t("Nashville Predators", "Predators", "Nashville", "preds"),
    _t("New Jersey Devils", "Devils", "New Jersey", "nj devils"),
    _t("New York Islanders", "Islanders", "New York", "isles", "ny islanders"),
    _t("New York Rangers", "Rangers", "New York", "nyr", "ny rangers"),
    _t("Ottawa Senators", "Senators", "Ottawa", "sens"),
    _t("Philadelphia Flyers", "Flyers", "Philadelphia"),
    _t("Pittsburgh Penguins", "Penguins", "Pittsburgh", "pens"),
    _t("San Jose Sharks", "Sharks", "San Jose"),
    _t("Seattle Kraken", "Kraken", "Seattle"),
    _t("St. Louis Blues", "Blues", "St. Louis", "saint louis blues"),
    _t("Tampa Bay Lightning", "Lightning", "Tampa Bay", "bolts"),
    _t("Toronto Maple Leafs", "Maple Leafs", "Toronto", "leafs"),
    _t("Utah Mammoth", "Mammoth", "Utah", "utah hockey club", "arizona coyotes", "coyotes"),
    _t("Vancouver Canucks", "Canucks", "Vancouver", "nucks"),
    _t("Vegas Golden Knights", "Golden Knights", "Vegas", "vgk", "knights"),
    _t("Washington Capitals", "Capitals", "Washington", "caps"),
    _t("Winnipeg Jets", "Jets", "Winnipeg"),
)

AMERICAN_FOOTBALL_TEAMS: tuple[TeamAliasEntry, ...] = (
    _t("Arizona Cardinals", "Cardinals", "Arizona", "cards"),
    _t("Atlanta Falcons", "Falcons", "Atlanta"),
    _t("Baltimore Ravens", "Ravens", "Baltimore"),
    _t("Buffalo Bills", "Bills", "Buffalo"),
    _t("Carolina Panthers", "Panthers", "Carolina"),
    _t("Chicago Bears", "Bears", "Chicago"),
    _t("Cincinnati Bengals", "Bengals", "Cincinnati"),
    _t("Cleveland Browns", "Browns", "Cleveland"),
    _t("Dallas Cowboys", "Cowboys", "Dallas"),
    _t("Denver Broncos", "Broncos", "Denver"),
    _t("Detroit Lions", "Lions", "Detroit"),
    _t("Green Bay Packers", "Packers", "Green Bay", "gb"),
    _t("Houston Texans", "Texans", "Houston"),
    _t("Indianapolis Colts", "Colts", "Indianapolis"),
    _t("Jacksonville Jaguars", "Jaguars", "Jacksonville", "jags"),
    _t("Kansas City Chiefs", "Chiefs", "Kansas City", "kc"),
    _t("Las Vegas Raiders", "Raiders", "Las Vegas", "lv raiders", "oakland raiders"),
    _t("Los Angeles Chargers", "Chargers", "Los Angeles", "la chargers", "bolts"),
    _t("Los Angeles Rams", "Rams", "Los Angeles", "la rams"),
    _t("Miami Dolphins", "Dolphins", "Miami", "fins"),
    _t("Minnesota Vikings", "Vikings", "Minnesota", "vikes"),
    _t("New England Patriots", "Patriots", "New England", "pats"),
    _t("New Orleans Saints", "Saints", "New Orleans"),
    _t("New York Giants", "Giants", "New York", "ny giants", "big blue"),
    _t("New York Jets", "Jets", "New York", "ny jets"),
    _t("Philadelphia Eagles", "Eagles", "Philadelphia", "philly"),
    _t("Pittsburgh Steelers", "Steelers", "Pittsburgh"),
    _t("San Francisco 49ers", "49ers", "San Francisco", "niners", "sf"),
    _t("Seattle Seahawks", "Seahawks", "Seattle", "hawks"),
    _t("Tampa Bay Buccaneers", "Buccaneers", "Tampa Bay", "bucs"),
    _t("Tennessee Titans", "Titans", "Tennessee"),
    _t("Washington Commanders", "Commanders", "Washington", "washington football team"),
)

SOCCER_TEAMS: tuple[TeamAliasEntry, ...] = (
    # England
    _t("Arsenal", "Arsenal", "London", "gunners", "afc"),
    _t("Aston Villa", "Villa", "Birmingham", "avfc"),
    _t("Chelsea", "Chelsea", "London", "blues", "cfc"),
    _t("Everton", "Everton", "Liverpool", "toffees"),
    _t("Liverpool", "Liverpool", "Liverpool", "lfc", "reds"),
    _t("Manchester City", "Man City", "Manchester", "mcfc", "city", "man. city"),
    _t("Manchester United", "Man United", "Manchester", "man utd", "mufc", "united", "man u"),
    _t("Newcastle", "Newcastle", "Newcastle", "newcastle united", "magpies", "nufc"),
    _t("Tottenham", "Tottenham", "London", "tottenham hotspur", "spurs", "thfc"),
    _t("West Ham", "West Ham", "London", "west ham united", "hammers"),
    _t("Brighton", "Brighton", "Brighton", "brighton & hove albion", "brighton and hove albion"),
    _t("Nottingham Forest", "Forest", "Nottingham", "nottm forest"),
    _t("Wolves", "Wolves", "Wolverhampton", "wolverhampton wanderers", "wolverhampton"),
    # Spain
    _t("Real Madrid", "Real Madrid", "Madrid", "madrid", "los blancos", "rmcf"),
    _t("Barcelona", "Barcelona", "Barcelona", "fc barcelona", "barca", "barça"),
    _t("Atletico Madrid", "Atletico", "Madrid", "atlético madrid", "atleti", "club atletico de madrid"),
    _t("Sevilla", "Sevilla", "Seville", "sevilla fc"),
    _t("Real Betis", "Betis", "Seville", "real betis balompie"),
    _t("Athletic Club", "Athletic", "Bilbao", "athletic bilbao"),
    _t("Real Sociedad", "La Real", "San Sebastian", "sociedad"),
    _t("Valencia", "Valencia", "Valencia", "valencia cf"),
    _t("Villarreal", "Villarreal", "Villarreal", "yellow submarine"),
    # Italy
    _t("Inter", "Inter", "Milan", "inter milan", "internazionale", "fc internazionale"),
    _t("AC Milan", "Milan", "Milan", "rossoneri"),
    _t("Juventus", "Juventus", "Turin", "juve"),
    _t("Napoli", "Napoli", "Naples", "ssc napoli"),
    _t("AS Roma", "Roma", "Rome", "roma"),
    _t("Lazio", "Lazio", "Rome", "ss lazio"),
    _t("Atalanta", "Atalanta", "Bergamo"),
    # Germany
    _t("Bayern Munich", "Bayern", "Munich", "bayern münchen", "fc bayern", "fcb"),
    _t("Borussia Dortmund", "Dortmund", "Dortmund", "bvb"),
    _t("Bayer Leverkusen", "Leverkusen", "Leverkusen", "bayer 04 leverkusen"),
    _t("RB Leipzig", "Leipzig", "Leipzig", "rasenballsport leipzig"),
    _t("Borussia Monchengladbach", "Gladbach", "Monchengladbach", "borussia mönchengladbach"),
    _t("Eintracht Frankfurt", "Frankfurt", "Frankfurt", "sge"),
    # France
    _t("Paris Saint Germain", "PSG", "Paris", "paris saint-germain", "paris sg"),
    _t("Marseille", "Marseille", "Marseille", "olympique de marseille", "om"),
    _t("Lyon", "Lyon", "Lyon", "olympique lyonnais", "ol"),
    _t("Monaco", "Monaco", "Monaco", "as monaco"),
    _t("Lille", "Lille", "Lille", "losc", "losc lille"),
)

TEAM_TABLES: dict[Sport, tuple[TeamAliasEntry, ...]] = {
    Sport.SOCCER: SOCCER_TEAMS,
    Sport.BASKETBALL: BASKETBALL_TEAMS,
    Sport.HOCKEY: HOCKEY_TEAMS,
    Sport.AMERICAN_FOOTBALL: AMERICAN_FOOTBALL_TEAMS,
}
