"""Round constants and mixing matrices of the BN254 Poseidon permutation."""

from __future__ import annotations

from collections.abc import Sequence

from .field import mul_acc, to_field

SPONGE_WIDTH = 4

C_CONSTANTS: tuple[int, ...] = (
    11633431549750490989983886834189948010834808234699737327785600195936805266405,
    17353750182810071758476407404624088842693631054828301270920107619055744005334,
    11575173631114898451293296430061690731976535592475236587664058405912382527658,
    9724643380371653925020965751082872123058642683375812487991079305063678725624,
    12239673881776349871068957838196514517245834187939809998544709168112271341816,
    8213756851595907076282161124887805623974269954849888814703174589291971114278,
    10700856158409047630150108954036764855084229282872224809993001752389888794123,
    4309412763160017434705250214903006191171337994199861518317363388963372067759,
    13621360205860636764861614843016050680668828136032459556937427803817198955108,
    18132744072298259781740650630118713682311962872833394850644922000343506947506,
    10497941627597965031241580959233976924443640728463059894693130666064841012508,
    6417221626367515719470057497947343409306030587855174225463612195298058047522,
    4674983908670004491400354631773389862914788156614497726528237310334040582090,
    873340198155297459771531732108476825755499970277106398541966195153210717293,
    9133482302270339304679323394649165596260136537041379860642176850815828132593,
    19667464340426349564507575767837635537801536066735594705258884488718315050710,
    331000697881161076911287227440410522823531125482651243929873545789686252480,
    2272743329483520819389104778389979623160875907321267447635586085241433137026,
    20056061746422267419826865443608176291944892343638717421077672390127627926748,
    21689171326367195475219251979604515804697103534428737460300868676042327355863,
    7810259695400914964411387917274296266504340291833964145271847716091273468172,
    14020998353215410538067420885522582505027736982810754116099481711825941220642,
    9245012796693900213810598954108273676196337302084957472786966340245263275743,
    8962981905074764319938168719738488892057352527537684271935935864821273084600,
    17332843516965697478516240137711403804881134130964557790940490781033584077729,
    2962481512633005781617177153208165597038681617596047875933934580338169170271,
    3545583524837641414415308887998349399894575957283448040799889114001300580510,
    9825748584719861837046057557518727684444343953070352817632834283853645430055,
    17858606226144476516342911398749600850253621768390773635294560290497927852949,
    19407543101519936976076786599565778993379293656069417288311522496519916759844,
    21548305854518815463471937514130615108218483277778620473090880308362072806993,
    5027201548230124209007202023859059041801516590630988556095211824751904956552,
    1278320788183053034261211126815207721315633476390581364649595040979423239088,
    21021340095589643000573495115924922630807303076545481383969066202975724043976,
    918385069628188207001966014851379853961258262104472252966637722307728618311,
    7965072539100037475925090906281896901763370093075915840665305317760262942154,
    7378267415483811789102866201206786220747449921553565182362543937740633252433,
    21420063039401631492872969377050715448026482027341082733718950945529081119315,
    6984186848935723943941543006673172228872682933412337752165652636767411415446,
    12107134736452640457370020100579770521541376434013671407419563526253119375027,
    8454625495310558663140928634608422027208548557279385097066005785045755903417,
    8017631723660250252193376543593224884977313136061388836952991492888330231080,
    19995498935394919030796805510514577077319475365066948284951310616396837691603,
    10247653874740427181312035102426523630476005333120089103526343619029364327967,
    13160967777591563201117493157286130579932067039961943416358165521611018318814,
    5676293694146750080963041160092533338992482128392885932218516813947476623756,
    11945330020489343984352429388118756789915736454422495317728221749575540363130,
    16575755931296600565681989782918578103656201270919325693721999523168590365097,
    6507448101913175376269537672277524478400652962306200709943614250998845221975,
    20000756050339437189232666465591830538666897533492662864197332257508545696504,
    2538139500492919467696560596150779916859394629326537877502980743087004819534,
    7871037999774788273525866585990542333245923983722339125599991222477852815605,
    8368558409504001796987467259514778517606739110778427183378433173780120985763,
    10459885623117973980697126416757555084518174957115744579590957904857119054380,
    3384626976854176329065296334831532874977246373363627584425356985964639685936,
    14737139139809423972873213065253246598075451131478157534053817909649707346105,
    5793030407008346395600962336988545239125310160053522248574303463872647020425,
    161797721038773165886882501305032811420344793568022002686671602943345085701,
    16804762399165090393770239542398927686244163302041099831597167085216405440289,
    15440431301017924367171251352865716677435047477418739126248587843926419339250,
    15570353803062363582500010627498291625214012654155408601153435169223922455380,
    15115601269705628455987152258857868396524812969878723314685224929600383566277,
    6356053248039389904799735666848118481514593163165587256076018940751965212118,
    16309790196305846370580640353745827882351273732480869449701807093685497609128,
    18447296906230039277288210321788736138216936478488032824595044533456671231353,
    6105351805879633605209308509080121925171118411225835503106175078539279138153,
    19852645406205681222287243787651048897744424465454177194550461625744671602479,
    9007786282651237028773725177593860474523832555275407287854317958939412791659,
    18947127426470143546676956069733014228119216644326548862881450999285087652129,
    4006307826238987763983990462011007258305618881936961734589789440938853470615,
    6924385845051163089352800210788743599810236082363643773698057309137019167115,
    2561599182344380405085465588284140808385687895597384476955417835636116225821,
    18225048309586676741223646736155757525087799474840323150729701492173705507839,
    16007480414415489869989133828107467718966566156219711380836971295459227141818,
    1248906006044888441798838825685606393060257012284188943868730340563960780866,
    20912864018050627133842158245163422113261374878008212512322853267715626252916,
    13216486202690474504584820948167785518004498504229717602814280132903612841969,
    17416264900059210810716133407170753459272974595675494034944092509584936747655,
    15395940772659312642272628762657023074462358708226101085466723152641135097674,
    4690442806047481777095177614992497363041188209965731514747362442612318535595,
    12980185426778583997022610696582563821013078583440402121868121411086576741088,
    19436953581443472871973830882428624449045305494959438365629984120779166561614,
    7021128259021787032633332177524933222338330182720924079777325144523649322812,
    18561291417991436986590120557027289864572049192245689357046574683519049533637,
    12019749240411640852887001467406069824508276240179427493437313074459156379732,
    19007581091212404202795325684108744075320879284650517772195719617120941682734,
    8172766643075822491744127151779052248074930479661223662192995838879026989201,
    1885998770792872998306340529689960371653339961062025442813774917754800650781,
)

M_MATRIX: tuple[tuple[int, ...], ...] = (
    (
        16023668707004248971294664614290028914393192768609916554276071736843535714477,
        19204974983793400699898444372535256207646557857575315905278218870961389967884,
        14672613178263529785795301930884172260797190868602674472542654261498546023746,
        21407770160218607278833379114951608489910182969042472165261557405353704846967,
    ),
    (
        17849615858846139011678879517964683507928512741474025695659909954675835121177,
        3722304780857845144568029505892077496425786544014166938942516810831732569870,
        20850178060552184587113773087797340350525370429749200838012809627359404457643,
        16058955581309173858487265533260133430557379878452348481750737813742488209262,
    ),
    (
        1013663139540921998616312712475594638459213772728467613870351821911056489570,
        11920634922168932145084219049241528148129057802067880076377897257847125830511,
        7082289538076771741936674361200789891432311337766695368327626572220036527624,
        593311177550138061601452020934455734040559402531605836278498327468203888086,
    ),
    (
        13211800058103802189838759488224684841774731021206389709687693993627918500545,
        6085682566123812000257211683010755099394491689511511633947011263229442977967,
        1787876543469562003404632310460227730887431311758627706450615128255538398187,
        341662423637860635938968460722645910313598807845686354625820505885069260074,
    ),
)

P_MATRIX: tuple[tuple[int, ...], ...] = (
    (
        16023668707004248971294664614290028914393192768609916554276071736843535714477,
        1219730950550419355108306775069417768387360853368230473071077119306046675572,
        15510244717642334318966561950951002886323209693558586261457615423770062424603,
        11219946567517274434615160614700308041943360069146893241486574665265822013129,
    ),
    (
        17849615858846139011678879517964683507928512741474025695659909954675835121177,
        17895496371927328657913965415733510282704230821151428152183928968046205671575,
        12435993608134323226059776526130103965669300982573338632451717852485169465950,
        19939917978926080723093316474977996505935743392066675936804030819065420290084,
    ),
    (
        1013663139540921998616312712475594638459213772728467613870351821911056489570,
        1028374094780216331619466080637054051304375033009771928288419347940821888279,
        5643605551164490740833629634586387123466682387363311974272188018328439695366,
        3961412593815053600853163531157674011892719679065160984658051723455387746952,
    ),
    (
        13211800058103802189838759488224684841774731021206389709687693993627918500545,
        16436452107226347557423995353975118393704571960279031780622882419612847031696,
        11841890240732656097844244837012648335708695431011214021127380678644769978309,
        10936049757440664316304266313740303505981633272820388610540392640560764966725,
    ),
)


def _check_width(state: Sequence[int | str]) -> None:
    if len(state) != SPONGE_WIDTH:
        raise ValueError(f"state must hold {SPONGE_WIDTH} elements, got {len(state)}")


def ark(state: Sequence[int | str], offset: int) -> tuple[int, ...]:
    """Add the round constants starting at ``offset`` to each state element."""
    _check_width(state)
    if offset < 0 or offset + SPONGE_WIDTH > len(C_CONSTANTS):
        raise ValueError(f"round constant offset out of range: {offset}")
    constants = C_CONSTANTS[offset : offset + SPONGE_WIDTH]
    return tuple(to_field(to_field(s) + c) for s, c in zip(state, constants))


def mix(
    state: Sequence[int | str], matrix: Sequence[Sequence[int]]
) -> tuple[int, ...]:
    """Multiply the state by ``matrix``: ``out[i] = sum(matrix[j][i] * state[j])``."""
    _check_width(state)
    if len(matrix) != SPONGE_WIDTH or any(len(row) != SPONGE_WIDTH for row in matrix):
        raise ValueError(f"matrix must be {SPONGE_WIDTH}x{SPONGE_WIDTH}")
    result = [0] * SPONGE_WIDTH
    for row, value in zip(matrix, state):
        result = [mul_acc(acc, coeff, value) for acc, coeff in zip(result, row)]
    return tuple(result)