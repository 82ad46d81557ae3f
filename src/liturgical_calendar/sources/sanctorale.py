"""Bundled sanctorale: the General Roman Calendar, keyed by month/day.

Short codes are ``MMDD``.  At most one entry per precedence level falls on
any date; a regional overlay that breaks this is rejected at load time.
"""

from __future__ import annotations

from liturgical_calendar.models import (
    Celebration,
    Color,
    Genus,
    PrecedenceLevel as P,
    Rank,
)

_W = (Color.ALBUS,)
_R = (Color.RUBER,)

_SOLL = (Rank.SOLLEMNITAS, P.SOLLEMNITAS_GENERALIS_3)
_LORD = (Rank.FESTUM, P.FESTUM_DOMINI_5)
_BMV = (Rank.FESTUM, P.FESTUM_BMV_7)
_FEST = (Rank.FESTUM, P.FESTUM_SANCTORUM_7)
_MEM = (Rank.MEMORIA, P.MEMORIA_OBLIGATORIA_10)
_OPT = (Rank.MEMORIA_AD_LIBITUM, P.MEMORIA_AD_LIBITUM_12)

# (MMDD, id, (rank, level), colors, Latin name, English name)
_GENERAL_ROMAN_CALENDAR = [
    ("0101", "mary_mother_of_god", _SOLL, _W,
     "Sanctae Dei Genetricis Mariae", "Mary, the Holy Mother of God"),
    ("0102", "basil_the_great_and_gregory_nazianzen_bishops_doctors", _MEM, _W,
     "Ss. Basilii Magni et Gregorii Nazianzeni", "Saints Basil the Great and Gregory Nazianzen"),
    ("0107", "raymond_of_penyafort_priest", _OPT, _W,
     "S. Raimundi de Peñafort", "Saint Raymond of Penyafort"),
    ("0113", "hilary_of_poitiers_bishop_doctor", _OPT, _W,
     "S. Hilarii", "Saint Hilary"),
    ("0117", "anthony_abbot", _MEM, _W,
     "S. Antonii, abbatis", "Saint Anthony, Abbot"),
    ("0121", "agnes_virgin_martyr", _MEM, _R,
     "S. Agnetis, virginis et martyris", "Saint Agnes, Virgin and Martyr"),
    ("0124", "francis_de_sales_bishop_doctor", _MEM, _W,
     "S. Francisci de Sales", "Saint Francis de Sales"),
    ("0125", "conversion_of_paul_apostle", _FEST, _W,
     "In Conversione S. Pauli, Apostoli", "The Conversion of Saint Paul the Apostle"),
    ("0126", "timothy_and_titus_bishops", _MEM, _W,
     "Ss. Timothei et Titi, episcoporum", "Saints Timothy and Titus, Bishops"),
    ("0128", "thomas_aquinas_priest_doctor", _MEM, _W,
     "S. Thomae de Aquino", "Saint Thomas Aquinas"),
    ("0131", "john_bosco_priest", _MEM, _W,
     "S. Ioannis Bosco, presbyteri", "Saint John Bosco, Priest"),
    ("0202", "presentation_of_the_lord", _LORD, _W,
     "In Praesentatione Domini", "The Presentation of the Lord"),
    ("0203", "blaise_bishop_martyr", _OPT, _R,
     "S. Blasii, episcopi et martyris", "Saint Blaise, Bishop and Martyr"),
    ("0205", "agatha_virgin_martyr", _MEM, _R,
     "S. Agathae, virginis et martyris", "Saint Agatha, Virgin and Martyr"),
    ("0206", "paul_miki_and_companions_martyrs", _MEM, _R,
     "Ss. Pauli Miki et sociorum, martyrum", "Saint Paul Miki and Companions, Martyrs"),
    ("0210", "scholastica_virgin", _MEM, _W,
     "S. Scholasticae, virginis", "Saint Scholastica, Virgin"),
    ("0211", "blessed_virgin_mary_of_lourdes", _OPT, _W,
     "Beatae Mariae Virginis de Lourdes", "Our Lady of Lourdes"),
    ("0214", "cyril_monk_and_methodius_bishop", _MEM, _W,
     "Ss. Cyrilli, monachi, et Methodii, episcopi", "Saints Cyril, Monk, and Methodius, Bishop"),
    ("0222", "chair_of_peter_apostle", _FEST, _W,
     "Cathedrae S. Petri, Apostoli", "The Chair of Saint Peter the Apostle"),
    ("0223", "polycarp_bishop_martyr", _MEM, _R,
     "S. Polycarpi, episcopi et martyris", "Saint Polycarp, Bishop and Martyr"),
    ("0307", "perpetua_and_felicity_martyrs", _MEM, _R,
     "Ss. Perpetuae et Felicitatis, martyrum", "Saints Perpetua and Felicity, Martyrs"),
    ("0317", "patrick_bishop", _OPT, _W,
     "S. Patricii, episcopi", "Saint Patrick, Bishop"),
    ("0319", "joseph_spouse_of_mary", _SOLL, _W,
     "S. Ioseph, Sponsi B. Mariae Virginis", "Saint Joseph, Spouse of the Blessed Virgin Mary"),
    ("0325", "annunciation", _SOLL, _W,
     "In Annuntiatione Domini", "The Annunciation of the Lord"),
    ("0407", "john_baptist_de_la_salle_priest", _MEM, _W,
     "S. Ioannis Baptistae de la Salle", "Saint John Baptist de la Salle"),
    ("0425", "mark_evangelist", _FEST, _R,
     "S. Marci, Evangelistae", "Saint Mark, Evangelist"),
    ("0429", "catherine_of_siena_virgin_doctor", _MEM, _W,
     "S. Catharinae Senensis", "Saint Catherine of Siena"),
    ("0502", "athanasius_bishop_doctor", _MEM, _W,
     "S. Athanasii", "Saint Athanasius"),
    ("0503", "philip_and_james_apostles", _FEST, _R,
     "Ss. Philippi et Iacobi, Apostolorum", "Saints Philip and James, Apostles"),
    ("0514", "matthias_apostle", _FEST, _R,
     "S. Matthiae, Apostoli", "Saint Matthias, Apostle"),
    ("0526", "philip_neri_priest", _MEM, _W,
     "S. Philippi Neri, presbyteri", "Saint Philip Neri, Priest"),
    ("0531", "visitation_of_mary", _BMV, _W,
     "In Visitatione B. Mariae Virginis", "The Visitation of the Blessed Virgin Mary"),
    ("0601", "justin_martyr", _MEM, _R,
     "S. Iustini, martyris", "Saint Justin, Martyr"),
    ("0603", "charles_lwanga_and_companions_martyrs", _MEM, _R,
     "Ss. Caroli Lwanga et sociorum, martyrum", "Saints Charles Lwanga and Companions, Martyrs"),
    ("0605", "boniface_bishop_martyr", _MEM, _R,
     "S. Bonifatii, episcopi et martyris", "Saint Boniface, Bishop and Martyr"),
    ("0611", "barnabas_apostle", _MEM, _R,
     "S. Barnabae, Apostoli", "Saint Barnabas, Apostle"),
    ("0613", "anthony_of_padua_priest_doctor", _MEM, _W,
     "S. Antonii de Padova", "Saint Anthony of Padua"),
    ("0624", "nativity_of_john_the_baptist", _SOLL, _W,
     "In Nativitate S. Ioannis Baptistae", "The Nativity of Saint John the Baptist"),
    ("0628", "irenaeus_bishop_martyr", _MEM, _R,
     "S. Irenaei, episcopi et martyris", "Saint Irenaeus, Bishop and Martyr"),
    ("0629", "peter_and_paul_apostles", _SOLL, _R,
     "Ss. Petri et Pauli, Apostolorum", "Saints Peter and Paul, Apostles"),
    ("0703", "thomas_apostle", _FEST, _R,
     "S. Thomae, Apostoli", "Saint Thomas, Apostle"),
    ("0711", "benedict_abbot", _MEM, _W,
     "S. Benedicti, abbatis", "Saint Benedict, Abbot"),
    ("0722", "mary_magdalene", _FEST, _W,
     "S. Mariae Magdalenae", "Saint Mary Magdalene"),
    ("0723", "bridget_religious", _OPT, _W,
     "S. Birgittae, religiosae", "Saint Bridget, Religious"),
    ("0725", "james_apostle", _FEST, _R,
     "S. Iacobi, Apostoli", "Saint James, Apostle"),
    ("0726", "joachim_and_anne_parents_of_mary", _MEM, _W,
     "Ss. Ioachim et Annae", "Saints Joachim and Anne"),
    ("0729", "martha_mary_and_lazarus", _MEM, _W,
     "Ss. Marthae, Mariae et Lazari", "Saints Martha, Mary and Lazarus"),
    ("0731", "ignatius_of_loyola_priest", _MEM, _W,
     "S. Ignatii de Loyola, presbyteri", "Saint Ignatius of Loyola, Priest"),
    ("0801", "alphonsus_liguori_bishop_doctor", _MEM, _W,
     "S. Alfonsi Mariae de' Liguori", "Saint Alphonsus Liguori"),
    ("0804", "john_vianney_priest", _MEM, _W,
     "S. Ioannis Mariae Vianney, presbyteri", "Saint John Vianney, Priest"),
    ("0806", "transfiguration_of_the_lord", _LORD, _W,
     "In Transfiguratione Domini", "The Transfiguration of the Lord"),
    ("0808", "dominic_priest", _MEM, _W,
     "S. Dominici, presbyteri", "Saint Dominic, Priest"),
    ("0810", "lawrence_deacon_martyr", _FEST, _R,
     "S. Laurentii, diaconi et martyris", "Saint Lawrence, Deacon and Martyr"),
    ("0811", "clare_virgin", _MEM, _W,
     "S. Clarae, virginis", "Saint Clare, Virgin"),
    ("0814", "maximilian_kolbe_priest_martyr", _MEM, _R,
     "S. Maximiliani Mariae Kolbe", "Saint Maximilian Kolbe"),
    ("0815", "assumption_of_mary", _SOLL, _W,
     "In Assumptione B. Mariae Virginis", "The Assumption of the Blessed Virgin Mary"),
    ("0822", "queenship_of_mary", _MEM, _W,
     "B. Mariae Virginis Reginae", "The Queenship of the Blessed Virgin Mary"),
    ("0824", "bartholomew_apostle", _FEST, _R,
     "S. Bartholomaei, Apostoli", "Saint Bartholomew, Apostle"),
    ("0827", "monica", _MEM, _W,
     "S. Monicae", "Saint Monica"),
    ("0828", "augustine_bishop_doctor", _MEM, _W,
     "S. Augustini", "Saint Augustine"),
    ("0829", "passion_of_john_the_baptist_martyr", _MEM, _R,
     "In Passione S. Ioannis Baptistae", "The Passion of Saint John the Baptist"),
    ("0903", "gregory_the_great_pope_doctor", _MEM, _W,
     "S. Gregorii Magni", "Saint Gregory the Great"),
    ("0908", "nativity_of_mary", _BMV, _W,
     "In Nativitate B. Mariae Virginis", "The Nativity of the Blessed Virgin Mary"),
    ("0913", "john_chrysostom_bishop_doctor", _MEM, _W,
     "S. Ioannis Chrysostomi", "Saint John Chrysostom"),
    ("0914", "exaltation_of_the_holy_cross", _LORD, _R,
     "In Exaltatione Sanctae Crucis", "The Exaltation of the Holy Cross"),
    ("0915", "blessed_virgin_mary_of_sorrows", _MEM, _W,
     "B. Mariae Virginis Perdolentis", "Our Lady of Sorrows"),
    ("0916", "cornelius_pope_and_cyprian_bishop_martyrs", _MEM, _R,
     "Ss. Cornelii et Cypriani, martyrum", "Saints Cornelius and Cyprian, Martyrs"),
    ("0921", "matthew_apostle_evangelist", _FEST, _R,
     "S. Matthaei, Apostoli et Evangelistae", "Saint Matthew, Apostle and Evangelist"),
    ("0927", "vincent_de_paul_priest", _MEM, _W,
     "S. Vincentii de Paul, presbyteri", "Saint Vincent de Paul, Priest"),
    ("0929", "michael_gabriel_and_raphael_archangels", _FEST, _W,
     "Ss. Michaelis, Gabrielis et Raphaelis, Archangelorum",
     "Saints Michael, Gabriel and Raphael, Archangels"),
    ("0930", "jerome_priest_doctor", _MEM, _W,
     "S. Hieronymi", "Saint Jerome"),
    ("1001", "therese_of_the_child_jesus_virgin_doctor", _MEM, _W,
     "S. Teresiae a Iesu Infante", "Saint Thérèse of the Child Jesus"),
    ("1002", "guardian_angels", _MEM, _W,
     "Ss. Angelorum Custodum", "The Holy Guardian Angels"),
    ("1004", "francis_of_assisi", _MEM, _W,
     "S. Francisci Assisiensis", "Saint Francis of Assisi"),
    ("1007", "blessed_virgin_mary_of_the_rosary", _MEM, _W,
     "B. Mariae Virginis a Rosario", "Our Lady of the Rosary"),
    ("1015", "teresa_of_jesus_virgin_doctor", _MEM, _W,
     "S. Teresiae a Iesu", "Saint Teresa of Jesus"),
    ("1017", "ignatius_of_antioch_bishop_martyr", _MEM, _R,
     "S. Ignatii Antiocheni", "Saint Ignatius of Antioch"),
    ("1018", "luke_evangelist", _FEST, _R,
     "S. Lucae, Evangelistae", "Saint Luke, Evangelist"),
    ("1028", "simon_and_jude_apostles", _FEST, _R,
     "Ss. Simonis et Iudae, Apostolorum", "Saints Simon and Jude, Apostles"),
    ("1101", "all_saints", _SOLL, _W,
     "Omnium Sanctorum", "All Saints"),
    ("1102", "all_souls", (Rank.SOLLEMNITAS, P.COMMEMORATIO_OMNIUM_DEFUNCTORUM_3),
     (Color.VIOLACEUS, Color.NIGER),
     "In Commemoratione Omnium Fidelium Defunctorum",
     "The Commemoration of All the Faithful Departed"),
    ("1104", "charles_borromeo_bishop", _MEM, _W,
     "S. Caroli Borromeo, episcopi", "Saint Charles Borromeo, Bishop"),
    ("1109", "dedication_of_the_lateran_basilica", _LORD, _W,
     "In Dedicatione Basilicae Lateranensis", "The Dedication of the Lateran Basilica"),
    ("1110", "leo_the_great_pope_doctor", _MEM, _W,
     "S. Leonis Magni", "Saint Leo the Great"),
    ("1111", "martin_of_tours_bishop", _MEM, _W,
     "S. Martini, episcopi", "Saint Martin of Tours, Bishop"),
    ("1117", "elizabeth_of_hungary_religious", _MEM, _W,
     "S. Elisabeth Hungariae, religiosae", "Saint Elizabeth of Hungary, Religious"),
    ("1121", "presentation_of_mary", _MEM, _W,
     "In Praesentatione B. Mariae Virginis", "The Presentation of the Blessed Virgin Mary"),
    ("1122", "cecilia_virgin_martyr", _MEM, _R,
     "S. Caeciliae, virginis et martyris", "Saint Cecilia, Virgin and Martyr"),
    ("1130", "andrew_apostle", _FEST, _R,
     "S. Andreae, Apostoli", "Saint Andrew, Apostle"),
    ("1203", "francis_xavier_priest", _MEM, _W,
     "S. Francisci Xavier, presbyteri", "Saint Francis Xavier, Priest"),
    ("1206", "nicholas_bishop", _OPT, _W,
     "S. Nicolai, episcopi", "Saint Nicholas, Bishop"),
    ("1207", "ambrose_bishop_doctor", _MEM, _W,
     "S. Ambrosii", "Saint Ambrose"),
    ("1208", "immaculate_conception_of_mary", _SOLL, _W,
     "In Conceptione Immaculata B. Mariae Virginis",
     "The Immaculate Conception of the Blessed Virgin Mary"),
    ("1213", "lucy_virgin_martyr", _MEM, _R,
     "S. Luciae, virginis et martyris", "Saint Lucy, Virgin and Martyr"),
    ("1214", "john_of_the_cross_priest_doctor", _MEM, _W,
     "S. Ioannis a Cruce", "Saint John of the Cross"),
    ("1225", "nativity_of_the_lord", (Rank.SOLLEMNITAS, P.SOLLEMNITAS_DOMINI_IN_CALENDARIO_2), _W,
     "In Nativitate Domini", "The Nativity of the Lord"),
    ("1226", "stephen_first_martyr", _FEST, _R,
     "S. Stephani, protomartyris", "Saint Stephen, the First Martyr"),
    ("1227", "john_apostle_evangelist", _FEST, _W,
     "S. Ioannis, Apostoli et Evangelistae", "Saint John, Apostle and Evangelist"),
    ("1228", "holy_innocents_martyrs", _FEST, _R,
     "Ss. Innocentium, martyrum", "The Holy Innocents, Martyrs"),
    ("1229", "thomas_becket_bishop_martyr", _OPT, _R,
     "S. Thomae Becket, episcopi et martyris", "Saint Thomas Becket, Bishop and Martyr"),
]


def _build(rows) -> tuple[Celebration, ...]:
    return tuple(
        Celebration(
            id=id,
            short_code=mmdd,
            genus=Genus.SANCTORALE,
            rank=rank,
            level=level,
            colors=colors,
            names={"la": la, "en": en},
            month=int(mmdd[:2]),
            day=int(mmdd[2:]),
        )
        for mmdd, id, (rank, level), colors, la, en in rows
    )


SANCTORALE: tuple[Celebration, ...] = _build(_GENERAL_ROMAN_CALENDAR)
