"""Built-in demo dataset: three competing wireless earphones."""

from typing import List

from ..core.models import ProductInfo, ProductInput, Review

DEMO_PRODUCTS = [
    {
        "name": "高品質ワイヤレスイヤホン Bluetooth 5.3 ノイズキャンセリング",
        "price": 4980,
        "url": "https://item.rakuten.co.jp/demo-audio/earphone-pro/",
    },
    {
        "name": "コンパクト完全ワイヤレスイヤホン 超軽量 防水IPX5",
        "price": 3280,
        "url": "https://item.rakuten.co.jp/demo-audio/earphone-lite/",
    },
    {
        "name": "スポーツ向けワイヤレスイヤホン 耳掛け式 Bluetooth5.2",
        "price": 5500,
        "url": "https://item.rakuten.co.jp/demo-sound/wireless-buds/",
    },
]

DEMO_REVIEWS = [
    [
        ("音質はとても良いです。低音がしっかり出ていてクリアなサウンドです。ノイズキャンセリングも電車内で効果を実感できました。ただ、バッテリーが2週間で持たなくなってきたのが残念です。", 4, "音質は最高"),
        ("この価格帯では考えられないほど音質が良いです。通話品質も問題なく、テレワークでも使えます。", 5, "コスパ最高"),
        ("ノイズキャンセリングの効果が素晴らしい。電車の中でも集中できます。装着感も軽くて長時間つけても疲れません。", 5, "通勤のお供に"),
        ("タッチ操作の誤反応が多すぎます。音量を変えようとして曲が止まることがしょっちゅうあります。物理ボタンにしてほしいです。", 2, "操作性が..."),
        ("左耳だけ接続が切れる現象が頻繁に発生します。音質は良いだけに残念。返品も検討しています。", 1, "接続不安定"),
        ("充電ケースの蓋がすぐ壊れました。1ヶ月で留め具が緩くなって勝手に開きます。充電ケースの作りをもう少ししっかりしてほしい。", 2, "ケースが弱い"),
        ("デザインがスタイリッシュで気に入っています。ケースもコンパクトで持ち運びしやすいです。", 4, "デザイン◎"),
        ("音質もデザインも満足していますが、バッテリーの持ちが悪すぎます。3時間くらいで切れるのは短すぎます。もう少しバッテリー持ちを改善してほしいです。", 3, "バッテリーが..."),
        ("耳が痛くなって30分以上つけられません。イヤーピースのサイズが自分には合わないようです。サイズ展開をもっと増やしてほしい。", 2, "フィット感"),
        ("防水機能がないので雨の日に使えません。防水機能があれば完璧なのに。", 3, "防水がほしい"),
    ],
    [
        ("軽くて長時間つけても疲れないのが最大のメリットです。通勤で毎日使っていますが快適です。", 5, "軽くて快適"),
        ("音質はこの価格帯では十分良いレベルです。低音は控えめですが、クリアな中高音が気持ちいいです。", 4, "音質OK"),
        ("バッテリーが1ヶ月で劣化して、満充電でも2時間しか持たなくなりました。最初は5時間持ったのに。", 1, "バッテリー劣化"),
        ("ペアリングが頻繁に切れるのがストレスです。スマホとの接続が毎朝やり直しになります。", 2, "接続切れ"),
        ("価格が安いのにこの品質は素晴らしい。コスパ最高のイヤホンだと思います。", 5, "コスパ良し"),
        ("防水IPX5なので汗をかいても安心して使えます。ジムでのトレーニング中も問題ありません。", 5, "防水最高"),
        ("タッチ操作の反応が遅くて、何度もタップしないと反応しないことがあります。もう少しタッチの感度を上げてほしい。", 3, "タッチ反応"),
        ("充電ケースが安っぽい。プラスチックの質感が明らかにチープです。ケースのデザインをもう少し高級感のあるものにしてほしい。", 3, "ケースの質"),
    ],
    [
        ("耳掛け式なのでランニング中も絶対に外れません。フィット感が抜群で激しい運動でも安定しています。", 5, "スポーツに最適"),
        ("音質は普通レベルです。特に感動はないですが、スポーツ用としては十分です。", 3, "音質は普通"),
        ("バッテリーの持ちが悪い。カタログでは6時間と書いてあるのに、実際は3時間くらいで切れます。バッテリー表記を正確にしてほしい。", 2, "バッテリー表記"),
        ("ノイズキャンセリングが弱くてほとんど効果がありません。外の音がスカスカ聞こえてきます。", 2, "NC弱い"),
        ("説明書が英語だけで日本語がありません。設定方法がわからず困りました。日本語の説明書を同梱してほしい。", 2, "日本語説明書なし"),
        ("マイクの音質が良くて、通話相手にクリアに聞こえると言われました。テレワークにも使えます。", 4, "通話品質◎"),
        ("耳掛け部分が硬くて長時間つけていると耳の上が痛くなります。もう少し柔らかい素材にしてほしい。", 3, "長時間は辛い"),
        ("値段の割に機能が少ない。この価格なら他にもっと良い選択肢があると思います。コスパは悪いです。", 2, "コスパ悪い"),
        ("Bluetooth接続は安定していて途切れることはほとんどありません。接続の安定性は評価できます。", 4, "接続安定"),
    ],
]


def get_demo_products() -> List[ProductInput]:
    """Demo products with their reviews, in a fixed order."""
    products = []
    for info, reviews in zip(DEMO_PRODUCTS, DEMO_REVIEWS):
        products.append(ProductInput(
            info=ProductInfo(**info),
            reviews=[Review(text=text, rating=rating, title=title) for text, rating, title in reviews],
        ))
    return products
